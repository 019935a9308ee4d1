# =============================================================================
# lib/newsletter/ - Newsletter Providers
# =============================================================================
# One module per email-marketing provider, all implementing
# NewsletterProvider (base.py). build_provider() picks the one named in
# settings.
#
# Usage:
#   provider = build_provider(settings, http_client)
#   result = await provider.subscribe("reader@example.com")
# =============================================================================

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import httpx

from lib.newsletter.base import (
    NewsletterProvider,
    NewsletterProviderError,
    SubscriptionResult,
)
from lib.newsletter.buttondown import ButtondownProvider
from lib.newsletter.convertkit import ConvertKitProvider
from lib.newsletter.emailoctopus import EmailOctopusProvider
from lib.newsletter.mailchimp import MailchimpProvider

if TYPE_CHECKING:
    from app.config import Settings


PROVIDERS: dict[str, Callable[["Settings", httpx.AsyncClient], NewsletterProvider]] = {
    "mailchimp": lambda s, http: MailchimpProvider(s.MAILCHIMP_API_KEY, s.MAILCHIMP_AUDIENCE_ID, http),
    "buttondown": lambda s, http: ButtondownProvider(s.BUTTONDOWN_API_KEY, http),
    "convertkit": lambda s, http: ConvertKitProvider(s.CONVERTKIT_API_KEY, s.CONVERTKIT_FORM_ID, http),
    "emailoctopus": lambda s, http: EmailOctopusProvider(s.EMAILOCTOPUS_API_KEY, s.EMAILOCTOPUS_LIST_ID, http),
}


def build_provider(settings: "Settings", http_client: httpx.AsyncClient) -> NewsletterProvider:
    """
    Create the provider configured in settings.NEWSLETTER_PROVIDER.

    Raises:
        NewsletterProviderError: Unknown provider or missing credentials
    """
    factory = PROVIDERS.get(settings.NEWSLETTER_PROVIDER)
    if factory is None:
        raise NewsletterProviderError(
            message=f"Unknown newsletter provider: {settings.NEWSLETTER_PROVIDER}",
            code="UNKNOWN_PROVIDER",
        )
    return factory(settings, http_client)


__all__ = [
    "ButtondownProvider",
    "ConvertKitProvider",
    "EmailOctopusProvider",
    "MailchimpProvider",
    "NewsletterProvider",
    "NewsletterProviderError",
    "PROVIDERS",
    "SubscriptionResult",
    "build_provider",
]
