"""Settings base do lead relay.

Valem para as duas hospedagens (app ASGI e handler Lambda). Lidas uma vez
por processo: mudar LOG_LEVEL ou SERVICE_NAME exige novo cold start.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_SERVICE_NAME = "lead_relay"
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}


@dataclass(frozen=True)
class BaseSettings:
    """Configurações comuns do processo.

    Attributes:
        environment: development | staging | production
        service_name: Campo `service` de todo log
        log_level: Valor bruto de LOG_LEVEL (validado em validate())
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def effective_log_level(self) -> str:
        """Nível aplicado ao logging; valor inválido cai para INFO."""
        return self.log_level if self.log_level in _LOG_LEVELS else DEFAULT_LOG_LEVEL

    def validate(self) -> list[str]:
        """Lista problemas de configuração (vazia = OK)."""
        errors: list[str] = []
        if not self.service_name.strip():
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        return errors


def _parse_environment(env_str: str) -> Environment:
    """Aceita aliases curtos (prod, stage); o resto vira development."""
    return _ENVIRONMENT_ALIASES.get(env_str.strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna BaseSettings do processo (cacheado)."""
    return _load_base_from_env()
