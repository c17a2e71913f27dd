from __future__ import annotations

import inspect
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "sdk"))

import telegram_bot_client  # noqa: E402
from telegram_bot_client.client import TelegramBotClient  # noqa: E402
from telegram_bot_client.exceptions import TelegramAPIError, TelegramHTTPError  # noqa: E402


def test_api_error_constructor_takes_message_envelope_method_payload() -> None:
    sig = inspect.signature(TelegramAPIError.__init__)
    assert list(sig.parameters) == ["self", "message", "err", "method", "payload"]


def test_http_error_constructor_takes_message_and_cause() -> None:
    sig = inspect.signature(TelegramHTTPError.__init__)
    assert list(sig.parameters) == ["self", "message", "error"]


def test_call_payload_is_optional() -> None:
    sig = inspect.signature(TelegramBotClient.call)
    assert sig.parameters["payload"].default is None


def test_package_exports_both_error_kinds() -> None:
    assert telegram_bot_client.TelegramAPIError is TelegramAPIError
    assert telegram_bot_client.TelegramHTTPError is TelegramHTTPError
    assert "TelegramAPIError" in telegram_bot_client.__all__
    assert "TelegramHTTPError" in telegram_bot_client.__all__
