"""Extração da mensagem a enviar a partir do corpo recebido do site."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.domain.lead_submission import LeadSubmission
from app.services.message_formatter import format_lead_message
from config.settings.telegram import DEFAULT_LEAD_TIMEZONE
from utils.errors import ParseError, ValidationError

if TYPE_CHECKING:
    from datetime import datetime

MESSAGE_REQUIRED = "message is required"
INVALID_BODY = "Invalid JSON body"


def normalize_message(
    payload: Mapping[str, Any],
    *,
    now: datetime | None = None,
    timezone: str = DEFAULT_LEAD_TIMEZONE,
) -> str:
    """Retorna o texto da notificação para o payload.

    Regras:
    1. `message` (ou `text`, se `message` vazio) não-branco é usado como está.
    2. Sem mensagem pronta, nome ou telefone disparam a formatação dos campos.
    3. Caso contrário, ValidationError.

    Raises:
        ParseError: Se o payload não for um objeto JSON.
        ValidationError: Se não houver mensagem derivável.
    """
    if not isinstance(payload, Mapping):
        raise ParseError(INVALID_BODY)

    submission = LeadSubmission.model_validate(dict(payload))

    message = submission.explicit_message
    if message.strip():
        return message

    if submission.has_identity:
        return format_lead_message(submission, now=now, timezone=timezone)

    raise ValidationError(MESSAGE_REQUIRED)
