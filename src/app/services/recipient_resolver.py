"""Parse da lista de chats destinatários (TELEGRAM_CHAT_IDS)."""

from __future__ import annotations

from utils.errors import ConfigurationError

EMPTY_RECIPIENTS = "TELEGRAM_CHAT_IDS must contain at least one ID"


def resolve_recipients(raw: str | None) -> list[str]:
    """Divide por vírgula, apara espaços e descarta segmentos vazios.

    Ordem e duplicatas são preservadas: cada entrada recebe um envio.

    Raises:
        ConfigurationError: Se nenhum ID sobrar após o parse.
    """
    chat_ids = [segment.strip() for segment in (raw or "").split(",")]
    chat_ids = [chat_id for chat_id in chat_ids if chat_id]
    if not chat_ids:
        raise ConfigurationError(EMPTY_RECIPIENTS)
    return chat_ids
