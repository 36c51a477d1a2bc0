"""Builder para mensagens de texto da Bot API (sendMessage)."""

from __future__ import annotations

from typing import Any

PARSE_MODE_HTML = "HTML"


class TextPayloadBuilder:
    """Builder para mensagens de texto com marcação HTML."""

    def build(self, chat_id: str, text: str) -> dict[str, Any]:
        """Constrói payload para sendMessage.

        Args:
            chat_id: ID do chat destinatário
            text: Texto já escapado pelo formatter (ou mensagem pronta)

        Returns:
            Payload conforme Bot API
        """
        return {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": PARSE_MODE_HTML,
        }
