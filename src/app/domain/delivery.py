"""Resultado do fan-out de uma notificação para os chats configurados."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class RecipientOutcome:
    """Resultado do envio para um único chat.

    Só é logado; a resposta HTTP expõe apenas o agregado.
    """

    chat_id: str
    delivered: bool
    error: str | None = None


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Agregado de entregas de uma invocação."""

    sent: int
    total: int
    outcomes: tuple[RecipientOutcome, ...] = field(default_factory=tuple)

    @property
    def failed(self) -> int:
        return self.total - self.sent

    @property
    def is_partial(self) -> bool:
        """True quando ao menos um destinatário não recebeu a mensagem."""
        return self.sent < self.total

    @classmethod
    def from_outcomes(cls, outcomes: list[RecipientOutcome]) -> DeliveryResult:
        return cls(
            sent=sum(1 for outcome in outcomes if outcome.delivered),
            total=len(outcomes),
            outcomes=tuple(outcomes),
        )

    def as_response(self) -> dict[str, Any]:
        """Corpo JSON devolvido ao site (entrega parcial ainda é ok=true)."""
        return {"ok": True, "sent": self.sent, "status": "success"}
