# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the subscription logic:
# - models/: Pydantic schemas for requests, provider payloads and responses
# - services/: The Mailchimp subscription flow and its error mapping
#
# No routes live here. Services raise app.exceptions errors and leave
# rendering to the FastAPI handlers.
# =============================================================================
