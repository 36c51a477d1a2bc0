"""Erros e helpers de parsing para a Telegram Bot API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TelegramApiError:
    """Erro retornado pela Bot API (`ok: false`)."""

    error_code: int
    description: str
    is_permanent: bool  # True se o chat/token nunca vai aceitar esta mensagem
    retry_after: int | None = None


def is_permanent_error(error_code: int) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros permanentes: 400 (chat not found, HTML inválido), 401 (token),
    403 (bot bloqueado), 404 (método/token)
    Erros transitórios: 429 (flood control), 500+
    """
    return error_code in {400, 401, 403, 404}


def parse_bot_error(response_data: dict[str, Any]) -> TelegramApiError | None:
    """Extrai informações de erro do response da Bot API.

    Args:
        response_data: Dict do response JSON

    Returns:
        TelegramApiError se `ok` não for true, None se sucesso
    """
    if response_data.get("ok") is True:
        return None

    error_code = response_data.get("error_code")
    if not isinstance(error_code, int):
        error_code = 0
    description = response_data.get("description") or "Erro desconhecido"

    parameters = response_data.get("parameters")
    retry_after = parameters.get("retry_after") if isinstance(parameters, dict) else None

    return TelegramApiError(
        error_code=error_code,
        description=str(description),
        is_permanent=is_permanent_error(error_code),
        retry_after=retry_after if isinstance(retry_after, int) else None,
    )
