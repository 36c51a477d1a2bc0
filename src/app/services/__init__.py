"""Serviços de aplicação.

Unidades puras usadas pelo relay (sem IO direto).
Implementações concretas de IO ficam em api/connectors/ e app/infra/.
"""

from app.services.message_formatter import escape_html, format_lead_message
from app.services.message_normalizer import normalize_message
from app.services.recipient_resolver import resolve_recipients

__all__ = [
    "escape_html",
    "format_lead_message",
    "normalize_message",
    "resolve_recipients",
]
