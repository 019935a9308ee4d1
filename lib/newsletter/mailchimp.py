"""Mailchimp provider for the generic newsletter endpoint."""

from __future__ import annotations

import httpx

from core.models.subscription import ProviderCredentials
from lib.mailchimp_client import MailchimpClient, MailchimpClientError
from lib.newsletter.base import NewsletterProviderError, SubscriptionResult, require


class MailchimpProvider:
    name = "mailchimp"

    def __init__(self, api_key: str | None, audience_id: str | None, http_client: httpx.AsyncClient):
        self._credentials = ProviderCredentials(
            api_key=require(api_key, "MAILCHIMP_API_KEY"),
            audience_id=require(audience_id, "MAILCHIMP_AUDIENCE_ID"),
        )
        self._http = http_client

    async def subscribe(self, email: str) -> SubscriptionResult:
        try:
            client = MailchimpClient(self._credentials, self._http)
            response = await client.add_list_member(email)
        except MailchimpClientError as e:
            raise NewsletterProviderError(e.message, code=e.code) from e
        return SubscriptionResult(status_code=response.status_code, body=response.body)
