"""Testes para formatação da notificação de lead."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from app.domain.lead_submission import LeadSubmission
from app.services.message_formatter import (
    escape_html,
    format_lead_message,
    format_timestamp,
)
from utils.errors import ConfigurationError

NOW = datetime(2024, 6, 4, 14, 30)


def _format(**fields: str) -> str:
    return format_lead_message(LeadSubmission(**fields), now=NOW)


class TestEscapeHtml:
    def test_escapes_markup_characters(self) -> None:
        assert escape_html('<script>&"</script>') == '&lt;script&gt;&amp;"&lt;/script&gt;'

    def test_ampersand_is_escaped_before_brackets(self) -> None:
        assert escape_html("&lt;") == "&amp;lt;"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values(self, value: str | None) -> None:
        assert escape_html(value) == ""


class TestFormatTimestamp:
    def test_russian_long_date(self) -> None:
        assert format_timestamp(NOW) == "4 июня 2024 г., 14:30"

    def test_pads_time_but_not_day(self) -> None:
        assert format_timestamp(datetime(2025, 1, 9, 7, 5)) == "9 января 2025 г., 07:05"

    def test_aware_datetime_is_converted_to_lead_timezone(self) -> None:
        message = format_lead_message(
            LeadSubmission(name="Иван"),
            now=datetime(2024, 6, 4, 11, 30, tzinfo=UTC),
            timezone="Europe/Moscow",
        )
        assert "4 июня 2024 г., 14:30" in message


class TestFormatLeadMessage:
    def test_header_and_date(self) -> None:
        message = _format(name="Иван")
        assert message.startswith(
            "🔔 <b>Новая заявка с сайта</b>\n\n📅 <b>Дата:</b> 4 июня 2024 г., 14:30\n\n"
        )

    def test_all_fields_in_fixed_order(self) -> None:
        message = _format(
            best_time="после 18:00",
            boiler_model="Vaillant turboTEC",
            address="ул. Ленина, 1",
            phone="+7 900 000-00-00",
            name="Иван Петров",
            description="Не греет воду",
        )
        assert message == (
            "🔔 <b>Новая заявка с сайта</b>\n\n"
            "📅 <b>Дата:</b> 4 июня 2024 г., 14:30\n\n"
            "👤 <b>ФИО:</b> Иван Петров\n"
            "📞 <b>Телефон:</b> +7 900 000-00-00\n"
            "📍 <b>Адрес:</b> ул. Ленина, 1\n"
            "🔥 <b>Модель котла:</b> Vaillant turboTEC\n"
            "⏰ <b>Удобное время:</b> после 18:00\n"
            "\n📝 <b>Описание:</b>\nНе греет воду\n"
        )

    def test_absent_and_empty_fields_are_omitted(self) -> None:
        message = _format(phone="+7 900", address="", boiler_model=None)
        assert "📞 <b>Телефон:</b> +7 900\n" in message
        assert "ФИО" not in message
        assert "Адрес" not in message
        assert "Модель котла" not in message
        assert "Удобное время" not in message
        assert "Описание" not in message

    def test_values_are_escaped(self) -> None:
        message = _format(name="<b>Boss</b>", description='<script>&"</script>')
        assert "👤 <b>ФИО:</b> &lt;b&gt;Boss&lt;/b&gt;\n" in message
        assert '&lt;script&gt;&amp;"&lt;/script&gt;' in message
        assert "<script>" not in message

    def test_multiline_description_is_kept(self) -> None:
        message = _format(name="A", description="linha 1\nlinha 2")
        assert message.endswith("📝 <b>Описание:</b>\nlinha 1\nlinha 2\n")

    def test_default_now_uses_current_time(self) -> None:
        message = format_lead_message(LeadSubmission(name="A"))
        assert "📅 <b>Дата:</b> " in message
        assert " г., " in message

    @pytest.mark.parametrize("zone", ["Mars/Olympus_Mons", "", "../etc/passwd"])
    def test_unknown_timezone_is_configuration_error(self, zone: str) -> None:
        with pytest.raises(ConfigurationError, match="LEAD_TIMEZONE"):
            format_lead_message(LeadSubmission(name="A"), timezone=zone)
