# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - handler.py: AWS Lambda entry point (Mangum)
# - config.py: Environment variable loading and settings
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# subscription logic to core/ and provider calls to lib/.
# =============================================================================

__version__ = "1.0.0"
