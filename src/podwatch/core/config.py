"""
Podwatch - Application Configuration
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------
    APP_ENV: str = Field(default="development")
    APP_DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    CLUSTER_NAME: str = Field(default="")

    # -------------------------------------------------------------------------
    # Slack
    # -------------------------------------------------------------------------
    SLACK_TIMEOUT: int = Field(default=10)

    # -------------------------------------------------------------------------
    # Observability
    # -------------------------------------------------------------------------
    MASK_SECRETS_IN_LOGS: bool = Field(default=True)


class SlackFallbacks(BaseSettings):
    """
    Environment fallbacks for the Slack provider configuration mapping.

    Read from process environment variables only, never from `.env`.
    All fields are plain strings so loading cannot fail validation.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
    )

    SLACK_TOKEN: str = Field(default="")
    SLACK_CHANNEL: str = Field(default="")
    SLACK_WEBHOOK: str = Field(default="")


def load_settings() -> Settings:
    """Read settings from the current environment, bypassing the cache."""
    return Settings()


def load_slack_fallbacks() -> SlackFallbacks:
    """Read the SLACK_* fallbacks from the current environment."""
    return SlackFallbacks()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()


settings = get_settings()
