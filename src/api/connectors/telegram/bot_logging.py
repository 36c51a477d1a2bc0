"""Helpers de logging para a Telegram Bot API (sem PII nem token)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .bot_errors import TelegramApiError

logger = logging.getLogger(__name__)


def log_bot_error(
    bot_error: TelegramApiError,
    method: str,
    status_code: int,
) -> None:
    """Loga erro da Bot API sem expor o token do endpoint."""
    logger.warning(
        "Erro da Telegram Bot API",
        extra={
            "method": method,
            "status_code": status_code,
            "error_code": bot_error.error_code,
            "description": bot_error.description,
            "is_permanent": bot_error.is_permanent,
            "retry_after": bot_error.retry_after,
        },
    )


def log_success(
    method: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "Envio Telegram bem-sucedido",
        extra={
            "method": method,
            "status_code": status_code,
        },
    )
