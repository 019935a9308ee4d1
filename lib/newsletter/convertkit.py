"""ConvertKit provider. Subscribes through a form (v3 API)."""

from __future__ import annotations

import httpx

from lib.newsletter.base import SubscriptionResult, decode_body, require

API_URL = "https://api.convertkit.com/v3"


class ConvertKitProvider:
    name = "convertkit"

    def __init__(self, api_key: str | None, form_id: str | None, http_client: httpx.AsyncClient):
        self._api_key = require(api_key, "CONVERTKIT_API_KEY")
        self._form_id = require(form_id, "CONVERTKIT_FORM_ID")
        self._http = http_client

    async def subscribe(self, email: str) -> SubscriptionResult:
        response = await self._http.post(
            f"{API_URL}/forms/{self._form_id}/subscribe",
            json={"email": email, "api_key": self._api_key},
        )
        return SubscriptionResult(status_code=response.status_code, body=decode_body(response))
