# =============================================================================
# lib/newsletter/base.py - Newsletter Provider Contract
# =============================================================================
# Every email-marketing provider behind /api/newsletter implements the
# NewsletterProvider protocol. Routes only ever see this interface, so the
# concrete provider is a configuration choice.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import httpx


class NewsletterProviderError(Exception):
    """Raised when a provider cannot be used or called."""

    def __init__(self, message: str, code: str = "PROVIDER_ERROR"):
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass(frozen=True)
class SubscriptionResult:
    """Outcome of one provider call."""

    status_code: int
    body: Any = field(default=None)

    @property
    def ok(self) -> bool:
        return self.status_code < 400


@runtime_checkable
class NewsletterProvider(Protocol):
    """
    Minimal contract for a newsletter provider.

    `subscribe` is async because it does one HTTP call. It returns the
    provider's status instead of raising on rejections, so the caller
    decides what the visitor sees.
    """

    name: str

    async def subscribe(self, email: str) -> SubscriptionResult:
        ...


def require(value: str | None, env_var: str) -> str:
    """Return a credential or fail with the variable that is missing."""
    if not value:
        raise NewsletterProviderError(
            message=f"Missing {env_var} environment variable",
            code="MISSING_CREDENTIALS",
        )
    return value


def decode_body(response: httpx.Response) -> Any:
    """JSON body of an httpx response, or its text when it isn't JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text
