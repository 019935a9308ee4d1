# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error reaches the client as {"error": "<message>"} with the status
# code carried by the exception.
# =============================================================================

from fastapi import Request
from fastapi.responses import JSONResponse


class NewsletterAPIException(Exception):
    """
    Base exception for the newsletter API.

    All custom exceptions inherit from this class. `code` is for logs only;
    clients see the message.
    """

    def __init__(
        self,
        message: str,
        code: str = "NEWSLETTER_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def to_dict(self) -> dict[str, str]:
        """Convert exception to API response dict."""
        return {"error": self.message}


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigurationError(NewsletterAPIException):
    """Raised when provider credentials are missing or malformed."""

    def __init__(self, message: str, code: str = "CONFIGURATION_ERROR"):
        super().__init__(
            message=f"Server configuration error: {message}",
            code=code,
            status_code=500,
        )


# =============================================================================
# Client Input Exceptions
# =============================================================================

class InvalidJSONError(NewsletterAPIException):
    """Raised when the request body is not valid JSON."""

    def __init__(self, message: str = "Invalid JSON in request body."):
        super().__init__(
            message=message,
            code="INVALID_JSON",
            status_code=400,
        )


class EmailRequiredError(NewsletterAPIException):
    """Raised when the request body has no email."""

    def __init__(self, message: str = "Email is required."):
        super().__init__(
            message=message,
            code="EMAIL_REQUIRED",
            status_code=400,
        )


# =============================================================================
# Provider Exceptions
# =============================================================================

class MemberExistsError(NewsletterAPIException):
    """Raised when the address is already on the list."""

    def __init__(self):
        super().__init__(
            message="This email is already subscribed.",
            code="MEMBER_EXISTS",
            status_code=409,
        )


class InvalidEmailError(NewsletterAPIException):
    """Raised when the provider rejects the address itself."""

    def __init__(self):
        super().__init__(
            message="Please provide a valid email address.",
            code="INVALID_EMAIL",
            status_code=400,
        )


class UpstreamResponseError(NewsletterAPIException):
    """Raised when the provider's response body cannot be parsed."""

    def __init__(self, provider: str = "Mailchimp"):
        super().__init__(
            message=f"Failed to process response from {provider}.",
            code="UPSTREAM_RESPONSE_ERROR",
            status_code=500,
        )


class SubscriptionFailedError(NewsletterAPIException):
    """Raised for any other provider rejection. Keeps the provider's status."""

    def __init__(self, status_code: int):
        super().__init__(
            message="Subscription failed. Please try again later.",
            code="SUBSCRIPTION_FAILED",
            status_code=status_code,
        )


class InternalServerError(NewsletterAPIException):
    """Raised when something unexpected happens while handling a request."""

    def __init__(self, message: str = "Internal server error. Please try again later."):
        super().__init__(
            message=message,
            code="INTERNAL_ERROR",
            status_code=500,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def newsletter_exception_handler(
    request: Request,
    exc: NewsletterAPIException
) -> JSONResponse:
    """Convert NewsletterAPIException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
