"""Typed settings loader for the terminal status display."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DisplaySettings(BaseSettings):
    """Display settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    refresh_interval_seconds: float = Field(
        default=0.5,
        gt=0,
        alias="STATUS_TAIL_REFRESH_INTERVAL_SECONDS",
    )
    max_messages: int = Field(default=10, ge=1, alias="STATUS_TAIL_MAX_MESSAGES")
    separator: str = Field(default="-" * 40, alias="STATUS_TAIL_SEPARATOR")
    log_level: LogLevel = Field(default="INFO", alias="STATUS_TAIL_LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        """Accept lower-case level names from the environment."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings(**overrides: Any) -> DisplaySettings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return DisplaySettings(**overrides)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
