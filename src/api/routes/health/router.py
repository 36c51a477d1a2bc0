"""Endpoints de health check."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings, load_telegram_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe — token e chats do Telegram configurados.

    Não chama a Bot API: só verifica a configuração lida do ambiente.
    """
    errors = load_telegram_settings().validate()
    ready = not errors

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "telegram": {
                "status": "ok" if ready else "failed",
                "errors": errors,
            },
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if not ready:
        logger.warning("readiness_failed", extra={"error_count": len(errors)})
    return JSONResponse(content=payload, status_code=200 if ready else 503)
