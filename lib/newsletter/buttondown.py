"""Buttondown provider (https://api.buttondown.email/v1)."""

from __future__ import annotations

import httpx

from lib.newsletter.base import SubscriptionResult, decode_body, require

API_URL = "https://api.buttondown.email/v1/subscribers"


class ButtondownProvider:
    name = "buttondown"

    def __init__(self, api_key: str | None, http_client: httpx.AsyncClient):
        self._api_key = require(api_key, "BUTTONDOWN_API_KEY")
        self._http = http_client

    async def subscribe(self, email: str) -> SubscriptionResult:
        response = await self._http.post(
            API_URL,
            headers={"Authorization": f"Token {self._api_key}"},
            json={"email": email},
        )
        return SubscriptionResult(status_code=response.status_code, body=decode_body(response))
