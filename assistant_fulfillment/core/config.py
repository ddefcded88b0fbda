"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Actions on Google project client id used to verify sign-in ID tokens.
    ACTIONS_CLIENT_ID: str | None = Field(default=None)

    WEBHOOK_AUTH_TOKEN: str | None = Field(default=None)
    ENABLE_WEBHOOK_AUTH: bool = Field(default=False)
    HEALTHCHECK_API_TOKEN: str | None = Field(default=None)
    ENABLE_ADMIN_AUTH: bool = Field(default=True)

    FULFILLMENT_DEBUG: bool = Field(default=False)
    FULFILLMENT_LOG_LEVEL: str = Field(default="info")
    FULFILLMENT_LOG_DIR: Path | None = Field(default=None)
    LOG_SCHEMA_VERSION: str = Field(default="1.0.0")


settings = Settings()
config = settings  # Alias used by route modules


__all__ = ["Settings", "settings", "config"]
