from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError


ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "sdk"))

from telegram_bot_client.config import Settings, configure_logging  # noqa: E402


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("TELEGRAM_API_BASE", "http://localhost:8081")
    monkeypatch.setenv("TELEGRAM_MAX_RETRIES", "5")
    settings = Settings()
    assert settings.api_base == "http://localhost:8081"
    assert settings.max_retries == 5


def test_settings_reject_zero_attempts() -> None:
    with pytest.raises(ValidationError):
        Settings(max_retries=0)


def test_configure_logging_sets_package_level() -> None:
    configure_logging("warning")
    assert logging.getLogger("telegram_bot_client").level == logging.WARNING
    configure_logging("debug")
    assert logging.getLogger("telegram_bot_client").level == logging.DEBUG


@pytest.mark.parametrize("level", ["verbose", "basic_format"])
def test_configure_logging_rejects_unknown_level(level: str) -> None:
    with pytest.raises(ValueError):
        configure_logging(level)
