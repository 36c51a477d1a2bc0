"""Formatação da notificação de lead para o Telegram (parse_mode=HTML).

Função pura: recebe a submissão e devolve o texto com marcação. Todo valor
vindo do formulário passa por escape_html antes da interpolação.
"""

from __future__ import annotations

import html
from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from config.settings.telegram import DEFAULT_LEAD_TIMEZONE, TIMEZONE_VARIABLE
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from app.domain.lead_submission import LeadSubmission

HEADER = "🔔 <b>Новая заявка с сайта</b>"
DATE_LABEL = "📅 <b>Дата:</b>"
DESCRIPTION_LABEL = "📝 <b>Описание:</b>"

# (campo, rótulo) na ordem fixa da notificação
FIELD_LABELS: tuple[tuple[str, str], ...] = (
    ("name", "👤 <b>ФИО:</b>"),
    ("phone", "📞 <b>Телефон:</b>"),
    ("address", "📍 <b>Адрес:</b>"),
    ("boiler_model", "🔥 <b>Модель котла:</b>"),
    ("best_time", "⏰ <b>Удобное время:</b>"),
)

# Genitivo, como em "4 июня 2024 г."
_RU_MONTH = (
    "января",
    "февраля",
    "марта",
    "апреля",
    "мая",
    "июня",
    "июля",
    "августа",
    "сентября",
    "октября",
    "ноября",
    "декабря",
)


def escape_html(value: str | None) -> str:
    """Escapa &, < e > (as únicas entidades do HTML do Telegram)."""
    if not value:
        return ""
    return html.escape(value, quote=False)


def format_timestamp(moment: datetime) -> str:
    """Data por extenso em russo: '4 июня 2024 г., 14:30'."""
    month = _RU_MONTH[moment.month - 1]
    return f"{moment.day} {month} {moment.year} г., {moment:%H:%M}"


def _localize(now: datetime | None, timezone: str) -> datetime:
    try:
        zone = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ConfigurationError(f"Invalid configuration: {TIMEZONE_VARIABLE}") from exc
    if now is None:
        return datetime.now(zone)
    if now.tzinfo is None:
        return now
    return now.astimezone(zone)


def format_lead_message(
    submission: LeadSubmission,
    *,
    now: datetime | None = None,
    timezone: str = DEFAULT_LEAD_TIMEZONE,
) -> str:
    """Monta a notificação a partir dos campos estruturados.

    Args:
        submission: Dados do formulário
        now: Momento da notificação (default: agora no fuso informado).
            Datetimes sem tzinfo são usados como estão.
        timezone: Nome IANA do fuso do cabeçalho

    Returns:
        Texto com marcação HTML; linhas de campos vazios são omitidas.

    Raises:
        ConfigurationError: Se `timezone` não for uma zona IANA válida.
    """
    stamp = format_timestamp(_localize(now, timezone))
    message = f"{HEADER}\n\n{DATE_LABEL} {stamp}\n\n"

    for field_name, label in FIELD_LABELS:
        value = getattr(submission, field_name)
        if value:
            message += f"{label} {escape_html(value)}\n"

    if submission.description:
        message += f"\n{DESCRIPTION_LABEL}\n{escape_html(submission.description)}\n"

    return message
