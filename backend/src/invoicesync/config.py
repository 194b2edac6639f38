"""
Application configuration loaded from environment variables.

All configuration is validated at startup to fail fast on misconfiguration.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with validation.

    All settings are loaded from environment variables with the same name.
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./invoices.db",
        description="SQLAlchemy connection string for the invoice store"
    )

    # Accounting system
    accounting_api_url: str | None = Field(
        default=None,
        description="Endpoint that receives invoices (POST, JSON body)"
    )
    accounting_api_key: str | None = Field(
        default=None,
        description="Bearer token for the accounting endpoint (optional)"
    )
    accounting_timeout_seconds: int = Field(
        default=30,
        ge=1,
        description="Per-request timeout when sending an invoice"
    )

    # Server
    debug: bool = Field(
        default=False,
        description="Enable debug mode with SQL echo and debug routes"
    )

    @property
    def accounting_configured(self) -> bool:
        """True if an accounting endpoint has been set."""
        return bool(self.accounting_api_url)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once at startup and cached for subsequent calls.
    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return Settings()
