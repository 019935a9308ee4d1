# =============================================================================
# core/services/subscription_service.py - Subscription Business Logic
# =============================================================================
# Runs the Mailchimp subscription flow and turns every outcome into either a
# MessageResponse or a NewsletterAPIException:
#
#   credentials -> body JSON -> email -> datacenter -> Mailchimp call
#     -> response JSON -> success / mapped error
#
# Separates HTTP concerns from provider/business logic.
# =============================================================================

import json
import logging

import httpx
from pydantic import ValidationError

from app.config import Settings
from app.exceptions import (
    ConfigurationError,
    EmailRequiredError,
    InvalidEmailError,
    InvalidJSONError,
    MemberExistsError,
    SubscriptionFailedError,
    UpstreamResponseError,
)
from core.models.subscription import (
    MemberRecord,
    MessageResponse,
    ProviderCredentials,
    ProviderError,
    SubscribeRequest,
)
from lib.mailchimp_client import MailchimpClient, MailchimpClientError, MailchimpResponse

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Thank you for subscribing!"

# Mailchimp error titles with a dedicated client error
MEMBER_EXISTS_TITLE = "Member Exists"
INVALID_RESOURCE_TITLE = "Invalid Resource"


class SubscriptionService:
    """
    Service for newsletter subscriptions through Mailchimp.

    Stateless: everything it needs is passed into each call.
    """

    @staticmethod
    def load_credentials(settings: Settings) -> ProviderCredentials:
        """
        Read Mailchimp credentials from settings.

        Raises:
            ConfigurationError: If the API key or audience ID is missing
        """
        if not settings.has_mailchimp_credentials:
            logger.error(
                "Missing Mailchimp environment variables (MAILCHIMP_API_KEY, MAILCHIMP_AUDIENCE_ID)"
            )
            raise ConfigurationError(
                "Missing Mailchimp credentials.",
                code="MISSING_CREDENTIALS",
            )
        return ProviderCredentials(
            api_key=settings.MAILCHIMP_API_KEY,
            audience_id=settings.MAILCHIMP_AUDIENCE_ID,
        )

    @staticmethod
    def parse_request(raw_body: bytes) -> SubscribeRequest:
        """
        Decode and validate the visitor's request body.

        Raises:
            InvalidJSONError: Body is not JSON, or nests too deeply to decode
            EmailRequiredError: Body has no usable email
        """
        try:
            payload = json.loads(raw_body)
        except (ValueError, RecursionError) as e:
            logger.error(f"Failed to parse JSON body: {e}")
            raise InvalidJSONError() from e

        try:
            return SubscribeRequest.model_validate(payload)
        except ValidationError as e:
            raise EmailRequiredError() from e

    @staticmethod
    def build_client(credentials: ProviderCredentials, http_client: httpx.AsyncClient) -> MailchimpClient:
        """
        Raises:
            ConfigurationError: If the API key has no datacenter suffix
        """
        try:
            return MailchimpClient(credentials, http_client)
        except MailchimpClientError as e:
            logger.error(str(e))
            raise ConfigurationError(e.message, code=e.code) from e

    @staticmethod
    def interpret_response(response: MailchimpResponse, email: str, audience_id: str) -> MessageResponse:
        """
        Map Mailchimp's answer to the client contract.

        Raises:
            MemberExistsError: "Member Exists"
            InvalidEmailError: "Invalid Resource"
            SubscriptionFailedError: Any other rejection, with Mailchimp's status
        """
        if response.is_success:
            try:
                member = MemberRecord.model_validate(response.body)
                logger.info(
                    f"Successfully subscribed {email} to Mailchimp list {audience_id} "
                    f"(member {member.id}, status {member.status})"
                )
            except ValidationError:
                logger.info(f"Successfully subscribed {email} to Mailchimp list {audience_id}")
            return MessageResponse(message=SUCCESS_MESSAGE)

        try:
            error = ProviderError.model_validate(response.body)
        except ValidationError:
            error = ProviderError(title=response.error_title)
        logger.error(f"Mailchimp API error: {response.body}")

        if error.title == MEMBER_EXISTS_TITLE:
            raise MemberExistsError()
        if error.title == INVALID_RESOURCE_TITLE:
            raise InvalidEmailError()
        raise SubscriptionFailedError(status_code=response.status_code)

    @classmethod
    async def subscribe_mailchimp(
        cls,
        settings: Settings,
        raw_body: bytes,
        http_client: httpx.AsyncClient,
    ) -> MessageResponse:
        """
        Subscribe the email in `raw_body` to the configured Mailchimp audience.

        Args:
            settings: Application settings holding the Mailchimp credentials
            raw_body: Undecoded request body
            http_client: Client used for the Mailchimp call

        Returns:
            MessageResponse on success

        Raises:
            NewsletterAPIException subclasses for every expected failure.
            Network errors (httpx.HTTPError) propagate unchanged.
        """
        credentials = cls.load_credentials(settings)
        request = cls.parse_request(raw_body)
        client = cls.build_client(credentials, http_client)

        try:
            response = await client.add_list_member(request.email)
        except MailchimpClientError as e:
            logger.error(str(e))
            raise UpstreamResponseError("Mailchimp") from e

        return cls.interpret_response(response, request.email, credentials.audience_id)
