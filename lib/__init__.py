# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains the outbound provider integrations:
# - mailchimp_client.py: Mailchimp "add list member" client
# - newsletter/: NewsletterProvider implementations for /api/newsletter
#
# These modules only need an httpx.AsyncClient and can be tested in
# isolation with httpx.MockTransport.
# =============================================================================

from lib.mailchimp_client import (
    MailchimpClient,
    MailchimpClientError,
    MailchimpResponse,
    extract_datacenter,
)
from lib.newsletter import (
    NewsletterProvider,
    NewsletterProviderError,
    SubscriptionResult,
    build_provider,
)

__all__ = [
    # Mailchimp
    "MailchimpClient",
    "MailchimpClientError",
    "MailchimpResponse",
    "extract_datacenter",
    # Generic providers
    "NewsletterProvider",
    "NewsletterProviderError",
    "SubscriptionResult",
    "build_provider",
]
