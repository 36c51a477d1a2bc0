"""Factory de wiring para Telegram (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.telegram import TelegramHttpClient, create_telegram_http_client

if TYPE_CHECKING:
    import httpx

    from config.settings import TelegramSettings


def create_telegram_sender(
    settings: TelegramSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TelegramHttpClient:
    """Cria sender Telegram (implementa TelegramSenderProtocol).

    O cliente é um async context manager: uma sessão httpx por invocação.
    """
    return create_telegram_http_client(settings, transport=transport)
