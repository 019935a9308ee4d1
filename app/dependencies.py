# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Tests swap any of them through app.dependency_overrides.
# =============================================================================

from typing import Annotated, AsyncIterator

import httpx
from fastapi import Depends

from app.config import Settings, get_settings


async def get_http_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> AsyncIterator[httpx.AsyncClient]:
    """
    Outbound HTTP client for provider calls.

    One client per request, closed when the response is sent. Nothing is
    kept between requests, which is what a serverless runtime expects.
    """
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS),
        headers={"Accept": "application/json"},
    ) as client:
        yield client


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
HttpClientDep = Annotated[httpx.AsyncClient, Depends(get_http_client)]
