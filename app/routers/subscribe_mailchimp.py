# =============================================================================
# app/routers/subscribe_mailchimp.py - Mailchimp Subscription Endpoint
# =============================================================================
# POST adds the posted email to the configured Mailchimp audience.
# GET only explains how to use the endpoint.
#
# Expected failures are raised as NewsletterAPIException subclasses by
# SubscriptionService and rendered by the handler in main.py.
# =============================================================================

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.dependencies import HttpClientDep, SettingsDep
from app.exceptions import InternalServerError, NewsletterAPIException
from core.models.subscription import ErrorResponse, MessageResponse
from core.services.subscription_service import SubscriptionService

router = APIRouter()
logger = logging.getLogger(__name__)

USAGE_MESSAGE = "Use POST method to subscribe to the newsletter."


@router.post(
    "",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid JSON, missing or invalid email"},
        409: {"model": ErrorResponse, "description": "Email already subscribed"},
        500: {"model": ErrorResponse, "description": "Configuration or upstream error"},
    },
)
async def subscribe(request: Request, settings: SettingsDep, http_client: HttpClientDep):
    """
    Subscribe an email address to the Mailchimp audience.

    - **email**: address to subscribe (required)
    """
    try:
        raw_body = await request.body()
        return await SubscriptionService.subscribe_mailchimp(settings, raw_body, http_client)

    except NewsletterAPIException:
        raise
    except Exception as e:
        logger.exception(f"Internal server error during Mailchimp subscription: {e}")
        raise InternalServerError()


@router.get("", response_model=MessageResponse)
async def usage():
    """Explain how to use this endpoint."""
    try:
        return MessageResponse(message=USAGE_MESSAGE)
    except Exception as e:
        logger.exception(f"Internal server error in GET handler: {e}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal server error.").model_dump(),
        )
