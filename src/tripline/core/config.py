"""Client configuration loaded from ``TRIPLINE_*`` environment variables.

Defaults target a locally running sandbox backend. The timeout mirrors the
httpx default; no retry policy is configured because every request is sent
exactly once.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FAILURE_MESSAGE = "Failed to load data"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ClientConfig(BaseSettings):
    """Pydantic settings container for the client stack."""

    model_config = SettingsConfigDict(env_prefix="TRIPLINE_")

    base_url: str = Field(
        default="http://localhost:8000/api/",
        min_length=1,
        description="Base URL every endpoint path is resolved against.",
    )
    timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout applied by httpx to connect, read and write phases.",
    )
    user_agent: str = Field(
        default="tripline-client/0.1",
        description="User-Agent header sent with every request.",
    )
    failure_message: str = Field(
        default=DEFAULT_FAILURE_MESSAGE,
        min_length=1,
        description="Fixed text controllers expose when a request fails.",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}")
        return level

    @classmethod
    def build_default(cls) -> "ClientConfig":
        """Construct configuration from the environment and defaults."""

        return cls()


__all__ = ["ClientConfig", "DEFAULT_FAILURE_MESSAGE"]
