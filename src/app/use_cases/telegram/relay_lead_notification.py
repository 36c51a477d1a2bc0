"""Use case de fan-out da notificação de lead para os chats do Telegram."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.domain.delivery import DeliveryResult, RecipientOutcome
from app.observability import record_delivery, record_latency
from utils.errors import TransportError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.telegram_sender import TelegramSenderProtocol

logger = logging.getLogger(__name__)


def mask_chat_id(chat_id: str) -> str:
    """Mantém só os 4 últimos caracteres do chat_id para logs."""
    if len(chat_id) <= 4:
        return "***"
    return f"***{chat_id[-4:]}"


class RelayLeadNotificationUseCase:
    """Envia a mesma mensagem para cada chat, uma tentativa por entrada.

    Falha de um destinatário é logada e não interrompe os demais.
    """

    def __init__(self, sender: TelegramSenderProtocol) -> None:
        self._sender = sender

    async def execute(self, message: str, chat_ids: Sequence[str]) -> DeliveryResult:
        """Executa o fan-out sequencial na ordem dos chat_ids."""
        outcomes = [await self._send_one(message, chat_id) for chat_id in chat_ids]
        result = DeliveryResult.from_outcomes(outcomes)

        record_delivery(result.sent, result.total)
        if result.is_partial:
            logger.warning(
                "relay_partial_delivery",
                extra={"sent": result.sent, "total": result.total},
            )
        else:
            logger.info(
                "relay_completed",
                extra={"sent": result.sent, "total": result.total},
            )
        return result

    async def _send_one(self, message: str, chat_id: str) -> RecipientOutcome:
        started_at = time.perf_counter()
        try:
            await self._sender.send_message(chat_id, message)
        except TransportError as exc:
            logger.warning(
                "relay_send_failed",
                extra={
                    "chat_id": mask_chat_id(chat_id),
                    "error": str(exc),
                    "status_code": exc.status_code,
                    "error_code": exc.error_code,
                },
            )
            return RecipientOutcome(chat_id=chat_id, delivered=False, error=str(exc))
        except Exception as exc:
            logger.exception(
                "relay_send_unexpected_error",
                extra={"chat_id": mask_chat_id(chat_id), "error_type": type(exc).__name__},
            )
            return RecipientOutcome(
                chat_id=chat_id,
                delivered=False,
                error=type(exc).__name__,
            )
        finally:
            record_latency(
                "telegram_client",
                "send_message",
                (time.perf_counter() - started_at) * 1000,
            )
        return RecipientOutcome(chat_id=chat_id, delivered=True)
