"""Settings específicas de Telegram.

Configurações do canal Telegram via Bot API.

Diferente dos demais settings, não há cache: o relay lê o ambiente a cada
invocação e repassa a instância explicitamente para o handler. A leitura
nunca levanta: valores malformados ficam registrados em `unparsed_variables`
e aparecem em validate()/invalid_variables().
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Constantes da Telegram Bot API
TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"
DEFAULT_LEAD_TIMEZONE: str = "Europe/Moscow"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 10.0

TIMEOUT_VARIABLE = "TELEGRAM_REQUEST_TIMEOUT_SECONDS"
TIMEZONE_VARIABLE = "LEAD_TIMEZONE"


def is_valid_timezone(name: str) -> bool:
    """True se `name` é uma zona IANA carregável."""
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do canal Telegram.

    Attributes:
        bot_token: Token do bot Telegram (obtido via @BotFather)
        chat_ids: IDs dos chats destinatários, separados por vírgula
        api_base_url: URL base da API
        request_timeout_seconds: Timeout de cada envio (sem retry)
        timezone: Fuso usado na data do cabeçalho da notificação
        unparsed_variables: Variáveis de ambiente com valor malformado
    """

    # Credenciais
    bot_token: str = ""
    chat_ids: str = ""

    # API
    api_base_url: str = TELEGRAM_API_BASE_URL

    # Timeout por destinatário
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    # Formatação
    timezone: str = DEFAULT_LEAD_TIMEZONE

    unparsed_variables: tuple[str, ...] = ()

    @property
    def is_configured(self) -> bool:
        """True quando token e lista de chats estão preenchidos."""
        return bool(self.bot_token.strip()) and bool(self.chat_ids.strip())

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com token do bot."""
        if not self.bot_token:
            raise ValueError("bot_token é obrigatório")
        return f"{self.api_base_url.rstrip('/')}/bot{self.bot_token}"

    @property
    def send_message_endpoint(self) -> str:
        """URL do método sendMessage."""
        return f"{self.api_endpoint}/sendMessage"

    def invalid_variables(self) -> list[str]:
        """Nomes das variáveis opcionais com valor inutilizável."""
        names = list(self.unparsed_variables)
        if self.request_timeout_seconds <= 0 and TIMEOUT_VARIABLE not in names:
            names.append(TIMEOUT_VARIABLE)
        if not is_valid_timezone(self.timezone):
            names.append(TIMEZONE_VARIABLE)
        return names

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram."""
        errors: list[str] = []
        if not self.bot_token.strip():
            errors.append("TELEGRAM_BOT_TOKEN não configurado")
        if not self.chat_ids.strip():
            errors.append("TELEGRAM_CHAT_IDS não configurado")
        for name in self.invalid_variables():
            if name == TIMEOUT_VARIABLE:
                errors.append(f"{TIMEOUT_VARIABLE} deve ser um número > 0")
            else:
                errors.append(f"{name} inválido")
        return errors


def _parse_timeout(raw: str | None) -> float | None:
    """Converte o timeout; None quando malformado, não finito ou <= 0."""
    if raw is None or not raw.strip():
        return DEFAULT_REQUEST_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def load_telegram_settings() -> TelegramSettings:
    """Carrega TelegramSettings de variáveis de ambiente (sem cache)."""
    unparsed: list[str] = []

    timeout = _parse_timeout(os.getenv(TIMEOUT_VARIABLE))
    if timeout is None:
        unparsed.append(TIMEOUT_VARIABLE)
        timeout = DEFAULT_REQUEST_TIMEOUT_SECONDS

    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        chat_ids=os.getenv("TELEGRAM_CHAT_IDS", ""),
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=timeout,
        timezone=os.getenv(TIMEZONE_VARIABLE, DEFAULT_LEAD_TIMEZONE),
        unparsed_variables=tuple(unparsed),
    )
