"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- telegram/: Telegram Bot API (sendMessage com parse_mode HTML)
"""

__all__: list[str] = []
