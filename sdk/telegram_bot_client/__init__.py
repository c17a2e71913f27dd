"""
telegram-bot-client — async SDK for the Telegram Bot API.

Usage:
    from telegram_bot_client import TelegramBotClient, TelegramAPIError

    async with TelegramBotClient("123:ABC") as bot:
        try:
            await bot.send_message(chat_id=123, text="hi")
        except TelegramAPIError as exc:
            if exc.retry_after:
                ...
"""

from .client import TelegramBotClient
from .config import Settings, configure_logging, get_settings
from .exceptions import TelegramAPIError, TelegramHTTPError

__all__ = [
    "TelegramBotClient",
    "TelegramAPIError",
    "TelegramHTTPError",
    "Settings",
    "get_settings",
    "configure_logging",
]
