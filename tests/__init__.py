# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Newsletter API:
# - test_models.py: Pydantic model validation
# - test_config.py: Settings loading
# - test_mailchimp_client.py: Mailchimp client against a mock transport
# - test_providers.py: Generic newsletter providers
# - test_subscribe_mailchimp.py: /api/subscribe-mailchimp endpoint
# - test_newsletter.py: /api/newsletter endpoint
# - test_health.py: health endpoints
#
# Run tests with: pytest
# =============================================================================
