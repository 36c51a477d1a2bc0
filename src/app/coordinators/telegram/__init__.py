"""Coordinator do relay de leads para o Telegram."""

from .relay_handler import (
    CORS_HEADERS,
    RelayHttpResponse,
    handle_relay_request,
    parse_request_body,
)

__all__ = [
    "CORS_HEADERS",
    "RelayHttpResponse",
    "handle_relay_request",
    "parse_request_body",
]
