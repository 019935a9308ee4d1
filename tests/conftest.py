# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds Settings objects without touching a local .env file
# - Runs the app with outbound HTTP answered by httpx.MockTransport
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main reads settings at import time

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("NEWSLETTER_PROVIDER", "mailchimp")

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.dependencies import get_http_client
from app.main import app


TEST_API_KEY = "abc123-us21"
TEST_AUDIENCE_ID = "list123"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def make_settings():
    """Factory for Settings with Mailchimp credentials filled in."""
    def _make(**overrides) -> Settings:
        values = {
            "MAILCHIMP_API_KEY": TEST_API_KEY,
            "MAILCHIMP_AUDIENCE_ID": TEST_AUDIENCE_ID,
            "NEWSLETTER_PROVIDER": "mailchimp",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return _make


@pytest.fixture
def provider_requests():
    """Outbound requests captured by the mock transport."""
    return []


@pytest.fixture
def make_client(make_settings, provider_requests):
    """
    Factory for a TestClient whose provider calls hit `responder`.

    `responder` takes an httpx.Request and returns an httpx.Response (or
    raises, to simulate a network failure).
    """
    def _make(responder=None, settings: Settings | None = None) -> TestClient:
        settings = settings or make_settings()

        def handler(request: httpx.Request) -> httpx.Response:
            provider_requests.append(request)
            if responder is None:
                raise AssertionError(f"Unexpected provider call: {request.method} {request.url}")
            return responder(request)

        async def http_client_override():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                yield client

        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_http_client] = http_client_override
        return TestClient(app, raise_server_exceptions=False)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def member_record():
    """Mailchimp body for a successful add."""
    return {
        "id": "852aaa9532cb36adfb5e9fef7a4206a9",
        "email_address": "reader@example.com",
        "status": "subscribed",
    }


@pytest.fixture
def member_exists_error():
    """Mailchimp body when the address is already on the list."""
    return {
        "type": "https://mailchimp.com/developer/marketing/docs/errors/",
        "title": "Member Exists",
        "status": 400,
        "detail": "reader@example.com is already a list member. Use PUT to insert or update list members.",
        "instance": "a1b2c3d4-0000-0000-0000-000000000000",
    }


@pytest.fixture
def invalid_resource_error():
    """Mailchimp body when the address is rejected as invalid."""
    return {
        "type": "https://mailchimp.com/developer/marketing/docs/errors/",
        "title": "Invalid Resource",
        "status": 400,
        "detail": "Please provide a valid email address.",
        "instance": "e5f6a7b8-0000-0000-0000-000000000000",
    }
