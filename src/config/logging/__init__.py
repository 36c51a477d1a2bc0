"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="lead_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("relay_completed", extra={"sent": 2, "total": 2})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Logs nunca carregam o texto da notificação, telefone do lead ou token do bot.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import BotTokenRedactionFilter, CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "BotTokenRedactionFilter",
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
]
