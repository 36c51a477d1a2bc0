"""Testes para RelayLeadNotificationUseCase."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from app.use_cases.telegram import RelayLeadNotificationUseCase, mask_chat_id
from utils.errors import TransportError


class FakeSender:
    """Sender fake: falha para os chat_ids informados."""

    def __init__(
        self,
        failing: set[str] | None = None,
        unexpected: set[str] | None = None,
    ) -> None:
        self._failing = failing or set()
        self._unexpected = unexpected or set()
        self.calls: list[tuple[str, str]] = []

    async def send_message(self, chat_id: str, text: str) -> dict[str, Any]:
        self.calls.append((chat_id, text))
        if chat_id in self._failing:
            raise TransportError("Telegram API error: chat not found", 400, 400)
        if chat_id in self._unexpected:
            raise RuntimeError("boom")
        return {"ok": True, "result": {"message_id": len(self.calls)}}


class TestRelayLeadNotificationUseCase:
    @pytest.mark.asyncio
    async def test_sends_same_text_to_every_recipient_in_order(self) -> None:
        sender = FakeSender()
        use_case = RelayLeadNotificationUseCase(sender)

        result = await use_case.execute("<b>oi</b>", ["1", "2", "3"])

        assert sender.calls == [("1", "<b>oi</b>"), ("2", "<b>oi</b>"), ("3", "<b>oi</b>")]
        assert result.sent == 3
        assert result.total == 3
        assert not result.is_partial

    @pytest.mark.asyncio
    async def test_one_failure_does_not_stop_the_loop(self) -> None:
        sender = FakeSender(failing={"2"})
        use_case = RelayLeadNotificationUseCase(sender)

        result = await use_case.execute("msg", ["1", "2", "3", "4"])

        assert [chat_id for chat_id, _ in sender.calls] == ["1", "2", "3", "4"]
        assert result.sent == 3
        assert result.total == 4
        failed = [outcome for outcome in result.outcomes if not outcome.delivered]
        assert [outcome.chat_id for outcome in failed] == ["2"]
        assert failed[0].error == "Telegram API error: chat not found"

    @pytest.mark.asyncio
    async def test_unexpected_errors_are_contained(self) -> None:
        sender = FakeSender(unexpected={"1"})
        result = await RelayLeadNotificationUseCase(sender).execute("msg", ["1", "2"])

        assert len(sender.calls) == 2
        assert result.sent == 1
        assert result.outcomes[0].error == "RuntimeError"

    @pytest.mark.asyncio
    async def test_all_failed_still_returns_result(self) -> None:
        sender = FakeSender(failing={"1", "2"})
        result = await RelayLeadNotificationUseCase(sender).execute("msg", ["1", "2"])

        assert result.sent == 0
        assert result.as_response() == {"ok": True, "sent": 0, "status": "success"}

    @pytest.mark.asyncio
    async def test_duplicates_are_sent_once_per_entry(self) -> None:
        sender = FakeSender()
        result = await RelayLeadNotificationUseCase(sender).execute("msg", ["7", "7"])

        assert len(sender.calls) == 2
        assert result.sent == 2

    @pytest.mark.asyncio
    async def test_logs_partial_delivery_without_full_chat_id(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        sender = FakeSender(failing={"-1009876543210"})
        with caplog.at_level(logging.INFO):
            await RelayLeadNotificationUseCase(sender).execute("segredo", ["-1009876543210", "1"])

        failures = [r for r in caplog.records if r.getMessage() == "relay_send_failed"]
        assert len(failures) == 1
        assert failures[0].chat_id == "***3210"
        assert any(r.getMessage() == "relay_partial_delivery" for r in caplog.records)
        assert all("segredo" not in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize(
    ("chat_id", "expected"),
    [("-1001234567890", "***7890"), ("12345", "***2345"), ("1234", "***"), ("", "***")],
)
def test_mask_chat_id(chat_id: str, expected: str) -> None:
    assert mask_chat_id(chat_id) == expected
