"""Configuração centralizada de logging.

Um único StreamHandler JSON no root logger, com correlation_id/service
injetados e o token do bot removido de qualquer mensagem. Tanto o app ASGI
quanto o handler Lambda chegam aqui via app.bootstrap.initialize_app().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import BotTokenRedactionFilter, CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "lead_relay"

# Bibliotecas que logam uma linha por request em INFO
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def _build_handler(
    level: str,
    service_name: str,
    correlation_id_getter: Callable[[], str] | None,
) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(BotTokenRedactionFilter())
    return handler


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Idempotente: runtimes serverless reaproveitam o processo entre
    invocações, então os handlers do root são substituídos, não somados.
    Fora de DEBUG, httpx/httpcore ficam em WARNING.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [_build_handler(level_upper, service_name, correlation_id_getter)]

    library_level = logging.DEBUG if level_upper == "DEBUG" else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)
