"""Observabilidade — logs estruturados e métricas.

Re-exporta funções de correlation_id e métricas para uso em toda a aplicação.

Uso:
    from app.observability import correlation_context, get_correlation_id
    from app.observability import record_delivery, record_latency
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    correlation_context,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_delivery,
    record_latency,
)

__all__ = [
    "CORRELATION_HEADER",
    "correlation_context",
    "generate_correlation_id",
    "get_correlation_id",
    "record_delivery",
    "record_latency",
    "reset_correlation_id",
    "set_correlation_id",
]
