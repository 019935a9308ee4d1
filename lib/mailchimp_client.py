# =============================================================================
# lib/mailchimp_client.py - Mailchimp Marketing API Client
# =============================================================================
# Thin async wrapper around the one Mailchimp call this service makes:
# "add list member" (POST /3.0/lists/{list_id}/members).
#
# The API host depends on the datacenter encoded in the API key
# (abc123-us21 -> https://us21.api.mailchimp.com). Authentication is HTTP
# Basic with any username and the API key as password.
#
# Usage:
#   async with httpx.AsyncClient() as http:
#       client = MailchimpClient(credentials, http)
#       result = await client.add_list_member("reader@example.com")
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from core.models.subscription import ProviderCredentials

logger = logging.getLogger(__name__)

API_VERSION = "3.0"
BASIC_AUTH_USERNAME = "anystring"


class MailchimpClientError(Exception):
    """
    Error while talking to Mailchimp.

    Carries a machine-readable code and, where possible, how to fix it.
    """

    def __init__(
        self,
        message: str,
        code: str = "MAILCHIMP_ERROR",
        suggestion: str | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


@dataclass(frozen=True)
class MailchimpResponse:
    """Status code and decoded JSON body of a Mailchimp call."""

    status_code: int
    body: Any

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def error_title(self) -> str | None:
        """`title` of a problem-details error body, if there is one."""
        if isinstance(self.body, dict) and isinstance(self.body.get("title"), str):
            return self.body["title"]
        return None


def extract_datacenter(api_key: str) -> str | None:
    """
    Get the datacenter from a Mailchimp API key.

    Example:
        extract_datacenter("abc123-us21")  # "us21"
        extract_datacenter("abc123")       # None
    """
    parts = api_key.split("-")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def build_members_url(datacenter: str, audience_id: str) -> str:
    """URL of the list-members collection for an audience."""
    return f"https://{datacenter}.api.mailchimp.com/{API_VERSION}/lists/{audience_id}/members"


class MailchimpClient:
    """
    Mailchimp client bound to one set of credentials.

    The httpx client is owned by the caller, so one is opened per request
    and nothing is shared between requests.

    Raises:
        MailchimpClientError: On construction, if the key has no datacenter
    """

    def __init__(self, credentials: ProviderCredentials, http_client: httpx.AsyncClient):
        datacenter = credentials.datacenter
        if datacenter is None:
            raise MailchimpClientError(
                message="Invalid Mailchimp API Key format.",
                code="INVALID_API_KEY",
                suggestion="MAILCHIMP_API_KEY must look like <key>-<datacenter>, e.g. abc123-us21",
            )
        self.credentials = credentials
        self.datacenter = datacenter
        self._http = http_client

    @property
    def members_url(self) -> str:
        return build_members_url(self.datacenter, self.credentials.audience_id)

    async def add_list_member(self, email: str, status: str = "subscribed") -> MailchimpResponse:
        """
        Add an address to the audience.

        Args:
            email: Address to add (not validated here)
            status: Member status, "subscribed" or "pending" for double opt-in

        Returns:
            MailchimpResponse with the HTTP status and decoded body

        Raises:
            MailchimpClientError: If the response body is not JSON
            httpx.HTTPError: On network failure
        """
        response = await self._http.post(
            self.members_url,
            auth=(BASIC_AUTH_USERNAME, self.credentials.api_key),
            json={"email_address": email, "status": status},
        )

        try:
            body = response.json()
        except ValueError as e:
            raise MailchimpClientError(
                message=f"Failed to parse Mailchimp response JSON: {e}",
                code="INVALID_RESPONSE",
            ) from e

        logger.debug(f"Mailchimp answered {response.status_code} for list {self.credentials.audience_id}")
        return MailchimpResponse(status_code=response.status_code, body=body)
