"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
depois pelo provedor de hospedagem (Vercel Log Drains, CloudWatch Insights).

Métricas suportadas:
- Latência: tempo de cada envio e da invocação completa
- Entrega: enviados vs total por invocação (alertar quando sent < total)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "telegram_client", "relay")
        operation: Nome da operação (ex: "send_message", "handle_request")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_delivery(
    sent: int,
    total: int,
    correlation_id: str | None = None,
) -> None:
    """Registra resultado agregado do fan-out.

    Args:
        sent: Envios confirmados pela API (ok=true)
        total: Quantidade de destinatários tentados
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_delivery",
        extra={
            "metric_type": "delivery",
            "component": "relay",
            "sent": sent,
            "failed": total - sent,
            "total": total,
            "delivery_ratio": round(sent / total, 3) if total else 0.0,
            "correlation_id": correlation_id,
        },
    )
