"""Configuration management with Pydantic Settings.

Loads and validates environment variables for the indexer collaborators,
the HTTP API, and logging.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE = ".env"
_ENV_FILE_ENCODING = "utf-8"


class IndexerSettings(BaseSettings):
    """Transaction indexer settings."""

    model_config = SettingsConfigDict(env_prefix="INDEXER_", extra="ignore")

    url: str = Field(
        default="http://localhost:3100",
        alias="INDEXER_URL",
        description="Root URL of the transaction indexer (GraphQL at /graphql/query)",
    )
    timeout_seconds: float = Field(
        default=10.0,
        alias="INDEXER_TIMEOUT_SECONDS",
        description="HTTP timeout for indexer requests",
        gt=0,
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate indexer URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("INDEXER_URL must be an HTTP(S) endpoint")
        return v.rstrip("/")


class ApiSettings(BaseSettings):
    """HTTP API settings."""

    model_config = SettingsConfigDict(env_prefix="API_", extra="ignore")

    host: str = Field(default="0.0.0.0", alias="API_HOST", description="Bind address")
    port: int = Field(default=8000, alias="API_PORT", description="Bind port", ge=1, le=65535)


class Settings(BaseSettings):
    """Main application settings.

    Example:
        ```python
        from market_activity.config import get_settings

        settings = get_settings()
        print(settings.indexer.url)
        ```
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding=_ENV_FILE_ENCODING,
        extra="ignore",
    )

    # Nested groups need the env file passed explicitly to read `.env`.
    indexer: IndexerSettings = Field(
        default_factory=lambda: IndexerSettings(
            _env_file=_ENV_FILE,
            _env_file_encoding=_ENV_FILE_ENCODING,
        )
    )
    api: ApiSettings = Field(
        default_factory=lambda: ApiSettings(
            _env_file=_ENV_FILE,
            _env_file_encoding=_ENV_FILE_ENCODING,
        )
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level",
    )

    def get_logging_level(self) -> int:
        """Get the numeric logging level."""
        level: int = getattr(logging, self.log_level)
        return level


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=settings.get_logging_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(settings.get_logging_level())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Raises:
        ValidationError: If environment variables have invalid values.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (for tests that change the environment)."""
    get_settings.cache_clear()
