"""Testes para handle_relay_request (lógica comum às duas hospedagens)."""

from __future__ import annotations

import json
from contextlib import asynccontextmanager
from datetime import datetime
from typing import TYPE_CHECKING, Any

import pytest

from app.coordinators.telegram import CORS_HEADERS, handle_relay_request, parse_request_body
from app.coordinators.telegram.relay_handler import MISSING_CONFIGURATION
from config.settings import TelegramSettings
from utils.errors import ParseError, TransportError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

NOW = datetime(2024, 6, 4, 14, 30)
CONFIGURED = TelegramSettings(bot_token="123:abc", chat_ids="1, 2,,3 ,")


class FakeSender:
    def __init__(self, failing: set[str] | None = None) -> None:
        self._failing = failing or set()
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    async def send_message(self, chat_id: str, text: str) -> dict[str, Any]:
        self.calls.append((chat_id, text))
        if chat_id in self._failing:
            raise TransportError("telegram_invalid_json")
        return {"ok": True}


class SenderFactory:
    """Registra as settings recebidas e entrega o FakeSender."""

    def __init__(self, sender: FakeSender) -> None:
        self.sender = sender
        self.settings: list[TelegramSettings] = []

    @asynccontextmanager
    async def __call__(self, settings: TelegramSettings) -> AsyncIterator[FakeSender]:
        self.settings.append(settings)
        try:
            yield self.sender
        finally:
            self.sender.closed = True


async def _handle(
    method: str,
    body: Any = None,
    settings: TelegramSettings = CONFIGURED,
    sender: FakeSender | None = None,
) -> tuple[Any, FakeSender]:
    sender = sender or FakeSender()
    response = await handle_relay_request(method, body, settings, SenderFactory(sender), now=NOW)
    return response, sender


def _json(response: Any) -> dict[str, Any]:
    return json.loads(response.body)


def _assert_cors(response: Any) -> None:
    for key, value in CORS_HEADERS.items():
        assert response.headers[key] == value


class TestMethods:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("settings", [CONFIGURED, TelegramSettings()])
    async def test_options_is_empty_200_regardless_of_configuration(
        self, settings: TelegramSettings
    ) -> None:
        response, sender = await _handle("OPTIONS", settings=settings)
        assert response.status_code == 200
        assert response.body == ""
        _assert_cors(response)
        assert sender.calls == []

    @pytest.mark.asyncio
    async def test_get_returns_deployment_page(self) -> None:
        response, _ = await _handle("GET", settings=TelegramSettings())
        assert response.status_code == 200
        assert "API работает" in response.body
        assert response.headers["Content-Type"].startswith("text/html")
        _assert_cors(response)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["PUT", "DELETE", "PATCH", ""])
    async def test_other_methods_are_405(self, method: str) -> None:
        response, _ = await _handle(method, b'{"message": "x"}')
        assert response.status_code == 405
        assert _json(response) == {"ok": False, "error": "Method not allowed"}
        _assert_cors(response)

    @pytest.mark.asyncio
    async def test_method_is_case_insensitive(self) -> None:
        response, _ = await _handle("post", b'{"message": "x"}')
        assert response.status_code == 200


class TestConfiguration:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "settings",
        [
            TelegramSettings(),
            TelegramSettings(bot_token="123:abc"),
            TelegramSettings(bot_token="123:abc", chat_ids="   "),
            TelegramSettings(chat_ids="1"),
        ],
    )
    async def test_missing_configuration_is_500(self, settings: TelegramSettings) -> None:
        response, sender = await _handle("POST", b'{"message": "x"}', settings=settings)
        assert response.status_code == 500
        assert _json(response) == {"ok": False, "error": MISSING_CONFIGURATION}
        _assert_cors(response)
        assert sender.calls == []

    @pytest.mark.asyncio
    async def test_configuration_is_checked_before_body(self) -> None:
        response, _ = await _handle("POST", b"{not json", settings=TelegramSettings())
        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_invalid_optional_settings_are_500_after_preflight(self) -> None:
        settings = TelegramSettings(bot_token="123:abc", chat_ids="1", timezone="Mars/Olympus_Mons")

        preflight, _ = await _handle("OPTIONS", settings=settings)
        assert preflight.status_code == 200

        response, sender = await _handle("POST", b'{"name": "A"}', settings=settings)
        assert response.status_code == 500
        assert _json(response) == {"ok": False, "error": "Invalid configuration: LEAD_TIMEZONE"}
        _assert_cors(response)
        assert sender.calls == []

    @pytest.mark.asyncio
    async def test_only_commas_is_500_distinct_from_missing_message(self) -> None:
        settings = TelegramSettings(bot_token="123:abc", chat_ids=" , ,")
        response, _ = await _handle("POST", b'{"message": "x"}', settings=settings)
        assert response.status_code == 500
        assert "at least one ID" in _json(response)["error"]

        empty_body, _ = await _handle("POST", b"{}")
        assert empty_body.status_code == 400


class TestBody:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"{not json", b"[1, 2]", b"\xff\xfe", "null"])
    async def test_invalid_body_is_400(self, body: bytes | str) -> None:
        response, _ = await _handle("POST", body)
        assert response.status_code == 400
        assert _json(response) == {"ok": False, "error": "Invalid JSON body"}
        _assert_cors(response)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"{}", None, b"", {"address": "x"}])
    async def test_missing_message_is_400(self, body: Any) -> None:
        response, sender = await _handle("POST", body)
        assert response.status_code == 400
        assert _json(response) == {"ok": False, "error": "message is required"}
        assert sender.calls == []


class TestRelay:
    @pytest.mark.asyncio
    async def test_explicit_message_is_sent_unmodified_to_every_recipient(self) -> None:
        body = json.dumps({"message": "<b>Pronto</b> & ok"}).encode()
        response, sender = await _handle("POST", body)

        assert response.status_code == 200
        assert _json(response) == {"ok": True, "sent": 3, "status": "success"}
        assert response.headers["Content-Type"] == "application/json"
        _assert_cors(response)
        assert sender.calls == [
            ("1", "<b>Pronto</b> & ok"),
            ("2", "<b>Pronto</b> & ok"),
            ("3", "<b>Pronto</b> & ok"),
        ]
        assert sender.closed

    @pytest.mark.asyncio
    async def test_structured_fields_are_formatted(self) -> None:
        body = json.dumps(
            {"name": "Иван", "phone": "+7 900", "description": '<script>&"</script>'},
            ensure_ascii=False,
        )
        _, sender = await _handle("POST", body)

        text = sender.calls[0][1]
        assert "📅 <b>Дата:</b> 4 июня 2024 г., 14:30" in text
        assert "👤 <b>ФИО:</b> Иван\n📞 <b>Телефон:</b> +7 900\n" in text
        assert '&lt;script&gt;&amp;"&lt;/script&gt;' in text

    @pytest.mark.asyncio
    async def test_partial_delivery_is_still_ok(self) -> None:
        response, sender = await _handle("POST", b'{"text": "x"}', sender=FakeSender({"2"}))
        assert response.status_code == 200
        assert _json(response) == {"ok": True, "sent": 2, "status": "success"}
        assert len(sender.calls) == 3

    @pytest.mark.asyncio
    async def test_settings_are_passed_to_sender_factory(self) -> None:
        factory = SenderFactory(FakeSender())
        await handle_relay_request("POST", {"message": "x"}, CONFIGURED, factory)
        assert factory.settings == [CONFIGURED]

    @pytest.mark.asyncio
    async def test_unexpected_error_is_500_with_cors(self) -> None:
        @asynccontextmanager
        async def broken_factory(settings: TelegramSettings) -> AsyncIterator[FakeSender]:
            raise RuntimeError("no client")
            yield FakeSender()  # pragma: no cover

        response = await handle_relay_request("POST", b'{"message": "x"}', CONFIGURED, broken_factory)
        assert response.status_code == 500
        assert _json(response) == {"ok": False, "error": "Internal server error"}
        _assert_cors(response)


class TestParseRequestBody:
    def test_mapping_is_copied(self) -> None:
        source = {"message": "x"}
        parsed = parse_request_body(source)
        assert parsed == source
        assert parsed is not source

    @pytest.mark.parametrize("body", [None, b"", "   "])
    def test_empty_is_empty_dict(self, body: Any) -> None:
        assert parse_request_body(body) == {}

    def test_utf8_bytes(self) -> None:
        assert parse_request_body('{"name": "Иван"}'.encode()) == {"name": "Иван"}

    def test_non_object_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_request_body('"texto"')
