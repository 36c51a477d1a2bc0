"""Filters de logging para injeção de contexto e redação de segredos.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: lead_relay)

Redação:
- Token do bot Telegram (inclusive dentro de URLs /bot<token>/ que o
  httpx registra em nível INFO)
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Formato de token do BotFather: <bot_id>:<35+ chars>
_BOT_TOKEN_PATTERN = re.compile(r"\b\d{5,}:[A-Za-z0-9_-]{30,}\b")
_BOT_URL_PATTERN = re.compile(r"/bot[^/\s]+/")

REDACTED_TOKEN = "[BOT_TOKEN]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


def redact_bot_token(value: str) -> str:
    """Remove tokens de bot de uma string de log."""
    redacted = _BOT_URL_PATTERN.sub(f"/bot{REDACTED_TOKEN}/", value)
    return _BOT_TOKEN_PATTERN.sub(REDACTED_TOKEN, redacted)


class BotTokenRedactionFilter(logging.Filter):
    """Mascara o token do bot em mensagens e argumentos de log."""

    def _sanitize(self, value: object) -> object:
        if not isinstance(value, str):
            # httpx passa a URL como httpx.URL nos args
            if type(value).__name__ == "URL":
                return redact_bot_token(str(value))
            return value
        return redact_bot_token(value)

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._sanitize(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(self._sanitize(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._sanitize(value) for key, value in record.args.items()}

        return True
