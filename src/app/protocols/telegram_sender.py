"""Protocolo de envio de mensagens para um chat do Telegram."""

from __future__ import annotations

from typing import Any, Protocol


class TelegramSenderProtocol(Protocol):
    """Contrato mínimo do cliente usado pelo fan-out.

    Deve retornar o JSON de sucesso da Bot API ou levantar
    utils.errors.TransportError.
    """

    async def send_message(self, chat_id: str, text: str) -> dict[str, Any]: ...
