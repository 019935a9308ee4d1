# =============================================================================
# core/models/subscription.py - Subscription Schemas
# =============================================================================
# These models define the contract around one subscription request:
# - SubscribeRequest: what the visitor posts
# - ProviderCredentials: Mailchimp key + audience pulled from settings
# - MemberRecord / ProviderError: the two shapes Mailchimp answers with
# - MessageResponse / ErrorResponse: what the client gets back
#
# Nothing here is persisted. Every instance lives for one request.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class SubscribeRequest(BaseModel):
    """
    Body of a subscription request.

    Extra fields (FNAME, LNAME, ...) are tolerated and ignored.

    Example:
        {"email": "reader@example.com"}
    """

    model_config = ConfigDict(extra="ignore")

    email: str = Field(
        ...,
        min_length=1,
        description="Address to subscribe. Format is checked by the provider."
    )


class ProviderCredentials(BaseModel):
    """
    Mailchimp credentials for a single request.

    The datacenter is the token after the first hyphen of the API key,
    e.g. "abc123-us21" -> "us21".
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
    audience_id: str

    @property
    def datacenter(self) -> str | None:
        """Datacenter suffix of the API key, or None when there isn't one."""
        from lib.mailchimp_client import extract_datacenter

        return extract_datacenter(self.api_key)


class MemberRecord(BaseModel):
    """Mailchimp list member returned on a successful add."""

    model_config = ConfigDict(extra="ignore")

    id: str
    email_address: str
    status: str


class ProviderError(BaseModel):
    """
    Mailchimp problem-details error body.

    Every field is optional so a partial body still maps to a client error.
    """

    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    title: str | None = None
    status: int | None = None
    detail: str | None = None
    instance: str | None = None


class MessageResponse(BaseModel):
    """Success body returned to the client."""
    message: str


class ErrorResponse(BaseModel):
    """Error body returned to the client."""
    error: str
