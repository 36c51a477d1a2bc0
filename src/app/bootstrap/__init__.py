"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import create_telegram_sender, initialize_app

    # Na inicialização do serviço (app ASGI ou cold start do Lambda)
    initialize_app()
"""

from __future__ import annotations

import logging

from app.bootstrap.telegram_factory import create_telegram_sender
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, load_telegram_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com logging estruturado JSON e correlation_id."""
    base = get_base_settings()
    configure_logging(
        level=base.effective_log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings no startup e loga os problemas encontrados.

    Nunca bloqueia o boot: sem token ou chats o relay ainda precisa
    responder OPTIONS e devolver o erro 500 em JSON.

    Returns:
        Lista de erros (vazia = OK).
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"telegram: {error}" for error in load_telegram_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    return errors


__all__ = [
    "create_telegram_sender",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
