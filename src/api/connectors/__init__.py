"""Connectors — adapters de borda para APIs externas.

Estrutura:
- telegram/: Telegram Bot API (sendMessage)
"""

__all__: list[str] = []
