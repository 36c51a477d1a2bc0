"""LeadSubmission - dados do formulário de lead recebidos do site.

Modelo efêmero: existe apenas durante uma invocação do relay e nunca é
persistido. Evita PII em logs; os valores só aparecem no texto enviado ao
Telegram.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

# Campos estruturados na ordem em que aparecem na notificação
STRUCTURED_FIELDS: tuple[str, ...] = (
    "name",
    "phone",
    "address",
    "boiler_model",
    "best_time",
    "description",
)


class LeadSubmission(BaseModel):
    """Submissão do formulário de lead (campos opcionais, chaves extras ignoradas)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    # Mensagem pronta (o cliente pode montar o texto sozinho)
    message: str | None = None
    text: str | None = None

    # Campos do formulário
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    boiler_model: str | None = None
    best_time: str | None = None
    description: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_str(cls, value: Any) -> str | None:
        # Formulários às vezes mandam telefone ou modelo como número;
        # false, 0 e afins contam como campo ausente
        if value is None or isinstance(value, str):
            return value
        if not value:
            return None
        return str(value)

    @property
    def explicit_message(self) -> str:
        """Mensagem pronta: `message` tem prioridade sobre `text`."""
        return self.message or self.text or ""

    @property
    def has_identity(self) -> bool:
        """True quando há nome ou telefone para montar a notificação."""
        return bool(self.name or self.phone)
