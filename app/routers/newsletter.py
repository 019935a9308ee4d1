# =============================================================================
# app/routers/newsletter.py - Generic Newsletter Endpoint
# =============================================================================
# Forwards a subscription to whichever provider NEWSLETTER_PROVIDER names.
# GET and POST share one handler.
# =============================================================================

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.dependencies import HttpClientDep, SettingsDep
from lib.newsletter import build_provider

router = APIRouter()
logger = logging.getLogger(__name__)


def _read_email(raw_body: bytes) -> str | None:
    try:
        payload = json.loads(raw_body)
    except (ValueError, RecursionError):
        return None
    if not isinstance(payload, dict):
        return None
    email = payload.get("email")
    return email if isinstance(email, str) and email else None


@router.api_route("", methods=["GET", "POST"])
async def newsletter(request: Request, settings: SettingsDep, http_client: HttpClientDep):
    """
    Subscribe an email address with the configured newsletter provider.

    Returns 201 on success, the provider's status when it rejects the
    address, and 500 when the provider can't be reached or configured.
    """
    email = _read_email(await request.body())
    if not email:
        return JSONResponse(status_code=400, content={"error": "Email is required"})

    try:
        provider = build_provider(settings, http_client)
        result = await provider.subscribe(email)
    except Exception as e:
        logger.exception(f"Newsletter subscription via {settings.NEWSLETTER_PROVIDER} failed: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})

    if not result.ok:
        logger.error(f"{provider.name} rejected subscription ({result.status_code}): {result.body}")
        return JSONResponse(
            status_code=result.status_code,
            content={"error": "There was an error subscribing to the list."},
        )

    logger.info(f"Subscribed {email} via {provider.name}")
    return JSONResponse(
        status_code=201,
        content={"message": "Successfully subscribed to the newsletter"},
    )
