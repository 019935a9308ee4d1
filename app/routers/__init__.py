# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - newsletter.py: Generic newsletter endpoint (configured provider)
# - subscribe_mailchimp.py: Mailchimp subscription endpoint
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import newsletter
from . import subscribe_mailchimp

__all__ = [
    "health",
    "newsletter",
    "subscribe_mailchimp",
]
