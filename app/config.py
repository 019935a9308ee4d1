# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   settings = get_settings()
#   print(settings.MAILCHIMP_AUDIENCE_ID)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Provider credentials are optional at startup. The handlers check them on
# each request and answer with a configuration error when they are missing.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


ProviderName = Literal["mailchimp", "buttondown", "convertkit", "emailoctopus"]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    Loaded once per process via get_settings() and never mutated afterwards.
    """

    # -------------------------------------------------------------------------
    # Mailchimp Configuration
    # -------------------------------------------------------------------------
    # Not required at startup - checked when a subscription request arrives

    MAILCHIMP_API_KEY: str | None = Field(
        default=None,
        description="Mailchimp API key, format <key>-<datacenter> (e.g., abc123-us21)"
    )

    MAILCHIMP_AUDIENCE_ID: str | None = Field(
        default=None,
        description="Mailchimp audience (list) ID that receives new members"
    )

    # -------------------------------------------------------------------------
    # Generic Newsletter Configuration
    # -------------------------------------------------------------------------
    # The provider behind /api/newsletter is chosen here, like a static
    # site metadata entry

    NEWSLETTER_PROVIDER: ProviderName = Field(
        default="mailchimp",
        description="Provider used by the generic newsletter endpoint"
    )

    BUTTONDOWN_API_KEY: str | None = Field(
        default=None,
        description="Buttondown API token"
    )

    CONVERTKIT_API_KEY: str | None = Field(
        default=None,
        description="ConvertKit public API key"
    )

    CONVERTKIT_FORM_ID: str | None = Field(
        default=None,
        description="ConvertKit form ID that new subscribers are added to"
    )

    EMAILOCTOPUS_API_KEY: str | None = Field(
        default=None,
        description="EmailOctopus API key"
    )

    EMAILOCTOPUS_LIST_ID: str | None = Field(
        default=None,
        description="EmailOctopus list ID"
    )

    # -------------------------------------------------------------------------
    # Outbound HTTP
    # -------------------------------------------------------------------------

    HTTP_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        le=60,
        description="Timeout for calls to the newsletter provider"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat MAILCHIMP_API_KEY="" the same as an unset variable
        env_ignore_empty=True,
        case_sensitive=True,
        frozen=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myblog.com" -> ["http://localhost:3000", "https://myblog.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def has_mailchimp_credentials(self) -> bool:
        """Both the API key and the audience ID are set."""
        return bool(self.MAILCHIMP_API_KEY and self.MAILCHIMP_AUDIENCE_ID)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()
