"""EmailOctopus provider (v1.6 API)."""

from __future__ import annotations

import httpx

from lib.newsletter.base import SubscriptionResult, decode_body, require

API_URL = "https://emailoctopus.com/api/1.6"


class EmailOctopusProvider:
    name = "emailoctopus"

    def __init__(self, api_key: str | None, list_id: str | None, http_client: httpx.AsyncClient):
        self._api_key = require(api_key, "EMAILOCTOPUS_API_KEY")
        self._list_id = require(list_id, "EMAILOCTOPUS_LIST_ID")
        self._http = http_client

    async def subscribe(self, email: str) -> SubscriptionResult:
        response = await self._http.post(
            f"{API_URL}/lists/{self._list_id}/contacts",
            json={"api_key": self._api_key, "email_address": email},
        )
        return SubscriptionResult(status_code=response.status_code, body=decode_body(response))
