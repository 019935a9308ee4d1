# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Newsletter API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import get_settings
from app.exceptions import NewsletterAPIException, newsletter_exception_handler
from app.routers import health, newsletter, subscribe_mailchimp

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Create FastAPI application
app = FastAPI(
    title="Newsletter API",
    description="""
## Newsletter Subscription API

Forwards a visitor's email address to an email-marketing provider.

| Endpoint | Provider |
|----------|----------|
| `/api/newsletter` | Whatever `NEWSLETTER_PROVIDER` names (mailchimp, buttondown, convertkit, emailoctopus) |
| `/api/subscribe-mailchimp` | Mailchimp, with friendly error messages |

### Quick Start

```bash
curl -X POST http://localhost:8000/api/subscribe-mailchimp \\
  -H "Content-Type: application/json" \\
  -d '{"email": "reader@example.com"}'
```
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Newsletter",
            "description": "Subscribe through the configured provider",
        },
        {
            "name": "Mailchimp",
            "description": "Subscribe to the Mailchimp audience",
        },
        {
            "name": "Health",
            "description": "API health and liveness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(NewsletterAPIException)
async def handle_newsletter_exception(request: Request, exc: NewsletterAPIException):
    """Handle custom newsletter API exceptions."""
    return await newsletter_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error."}
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

app.include_router(
    newsletter.router,
    prefix="/api/newsletter",
    tags=["Newsletter"]
)

app.include_router(
    subscribe_mailchimp.router,
    prefix="/api/subscribe-mailchimp",
    tags=["Mailchimp"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Newsletter API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/health",
    }
