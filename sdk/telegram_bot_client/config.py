from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings of the Bot API client.

    Priority:
    - environment variables with the ``TELEGRAM_`` prefix (highest)
    - .env in the working directory
    - defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="TELEGRAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base: str = "https://api.telegram.org"
    timeout: float = 30.0
    # Total attempts per call, first one included.
    max_retries: int = Field(default=3, ge=1)
    log_level: str = "info"


@lru_cache
def get_settings() -> Settings:
    # Cached settings for process lifetime.
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Apply ``level`` (or ``Settings.log_level``) to the package logger."""
    name = (level or get_settings().log_level).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level: {name!r}")
    logging.getLogger("telegram_bot_client").setLevel(numeric)
