# =============================================================================
# tests/test_providers.py - Newsletter Provider Tests
# =============================================================================
# Each provider is called directly with an httpx.AsyncClient backed by
# httpx.MockTransport.
# =============================================================================

import asyncio
import json

import httpx
import pytest

from lib.newsletter import (
    ButtondownProvider,
    ConvertKitProvider,
    EmailOctopusProvider,
    MailchimpProvider,
    NewsletterProvider,
    NewsletterProviderError,
    SubscriptionResult,
    build_provider,
)


def run_subscribe(make_provider, email="reader@example.com", status_code=200, body=None):
    """Subscribe through a provider and return (result, captured requests)."""
    captured = []

    def handler(request):
        captured.append(request)
        return httpx.Response(status_code, json=body if body is not None else {})

    async def _run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            return await make_provider(http).subscribe(email)

    return asyncio.run(_run()), captured


# =============================================================================
# SubscriptionResult
# =============================================================================

class TestSubscriptionResult:

    @pytest.mark.parametrize("status_code,ok", [(200, True), (201, True), (302, True), (400, False), (500, False)])
    def test_ok(self, status_code, ok):
        assert SubscriptionResult(status_code=status_code).ok is ok


# =============================================================================
# Providers
# =============================================================================

class TestMailchimpProvider:

    def test_subscribe(self):
        result, captured = run_subscribe(
            lambda http: MailchimpProvider("abc123-us21", "list123", http),
            body={"id": "1", "email_address": "reader@example.com", "status": "subscribed"},
        )

        assert result.ok
        assert str(captured[0].url) == "https://us21.api.mailchimp.com/3.0/lists/list123/members"
        assert json.loads(captured[0].content) == {"email_address": "reader@example.com", "status": "subscribed"}

    def test_missing_audience(self):
        with pytest.raises(NewsletterProviderError, match="MAILCHIMP_AUDIENCE_ID"):
            MailchimpProvider("abc123-us21", None, httpx.AsyncClient())

    def test_bad_key_format(self):
        with pytest.raises(NewsletterProviderError, match="Invalid Mailchimp API Key format"):
            run_subscribe(lambda http: MailchimpProvider("abc123", "list123", http))


class TestButtondownProvider:

    def test_subscribe(self):
        result, captured = run_subscribe(
            lambda http: ButtondownProvider("bd-token", http), status_code=201,
        )

        assert result.status_code == 201
        assert captured[0].headers["Authorization"] == "Token bd-token"
        assert json.loads(captured[0].content) == {"email": "reader@example.com"}

    def test_rejection_is_returned(self):
        result, _ = run_subscribe(
            lambda http: ButtondownProvider("bd-token", http),
            status_code=400,
            body={"code": "email_already_exists"},
        )

        assert not result.ok
        assert result.body == {"code": "email_already_exists"}


class TestConvertKitProvider:

    def test_subscribe(self):
        result, captured = run_subscribe(lambda http: ConvertKitProvider("ck-key", "4242", http))

        assert result.ok
        assert str(captured[0].url) == "https://api.convertkit.com/v3/forms/4242/subscribe"
        assert json.loads(captured[0].content) == {"email": "reader@example.com", "api_key": "ck-key"}


class TestEmailOctopusProvider:

    def test_subscribe(self):
        result, captured = run_subscribe(lambda http: EmailOctopusProvider("eo-key", "list-9", http))

        assert result.ok
        assert str(captured[0].url) == "https://emailoctopus.com/api/1.6/lists/list-9/contacts"
        assert json.loads(captured[0].content) == {"api_key": "eo-key", "email_address": "reader@example.com"}

    def test_missing_list(self):
        with pytest.raises(NewsletterProviderError, match="EMAILOCTOPUS_LIST_ID"):
            EmailOctopusProvider("eo-key", "", httpx.AsyncClient())


# =============================================================================
# Registry
# =============================================================================

class TestBuildProvider:

    @pytest.mark.parametrize("name,overrides,expected", [
        ("mailchimp", {}, MailchimpProvider),
        ("buttondown", {"BUTTONDOWN_API_KEY": "bd"}, ButtondownProvider),
        ("convertkit", {"CONVERTKIT_API_KEY": "ck", "CONVERTKIT_FORM_ID": "1"}, ConvertKitProvider),
        ("emailoctopus", {"EMAILOCTOPUS_API_KEY": "eo", "EMAILOCTOPUS_LIST_ID": "2"}, EmailOctopusProvider),
    ])
    def test_builds_configured_provider(self, make_settings, name, overrides, expected):
        provider = build_provider(make_settings(NEWSLETTER_PROVIDER=name, **overrides), httpx.AsyncClient())

        assert isinstance(provider, expected)
        assert isinstance(provider, NewsletterProvider)
        assert provider.name == name
