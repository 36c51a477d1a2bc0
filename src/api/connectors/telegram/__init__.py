"""Conector da Telegram Bot API."""

from .bot_errors import TelegramApiError, is_permanent_error, parse_bot_error
from .http_client import TelegramHttpClient, create_telegram_http_client

__all__ = [
    "TelegramApiError",
    "TelegramHttpClient",
    "create_telegram_http_client",
    "is_permanent_error",
    "parse_bot_error",
]
