# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .subscription_service import SubscriptionService

__all__ = [
    "SubscriptionService",
]
