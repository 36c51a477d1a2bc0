"""Builders de payload da Telegram Bot API."""

from .text import PARSE_MODE_HTML, TextPayloadBuilder

__all__ = [
    "PARSE_MODE_HTML",
    "TextPayloadBuilder",
]
