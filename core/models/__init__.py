# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - subscription.py: subscription request, Mailchimp payloads, client bodies
#
# These models define the "contract" between API, providers and clients.
# =============================================================================

from .subscription import (
    ErrorResponse,
    MemberRecord,
    MessageResponse,
    ProviderCredentials,
    ProviderError,
    SubscribeRequest,
)

__all__ = [
    "ErrorResponse",
    "MemberRecord",
    "MessageResponse",
    "ProviderCredentials",
    "ProviderError",
    "SubscribeRequest",
]
