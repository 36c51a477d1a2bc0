"""Endpoint do relay de leads (hospedagem ASGI: Vercel, Cloud Run, uvicorn).

Endpoints:
- OPTIONS /api/telegram: pre-flight CORS
- GET /api/telegram: página de verificação do deploy
- POST /api/telegram: recebe o formulário e notifica os chats

Adapter fino: toda a regra está em app.coordinators.telegram.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response

from app.bootstrap import create_telegram_sender
from app.coordinators.telegram import handle_relay_request
from app.observability import CORRELATION_HEADER, correlation_context
from config.settings import load_telegram_settings

logger = logging.getLogger(__name__)

router = APIRouter()

# Todo verbo chega ao handler: o 405 também precisa dos headers CORS
_ROUTED_METHODS = [
    "GET",
    "POST",
    "OPTIONS",
    "PUT",
    "PATCH",
    "DELETE",
    "HEAD",
    "TRACE",
    "CONNECT",
]


@router.api_route("/telegram", methods=_ROUTED_METHODS)
async def relay_lead(request: Request) -> Response:
    """Traduz a requisição Starlette para o relay e a resposta de volta."""
    with correlation_context(request.headers.get(CORRELATION_HEADER)):
        body = await request.body() if request.method == "POST" else None
        result = await handle_relay_request(
            request.method,
            body,
            load_telegram_settings(),
            create_telegram_sender,
        )

    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )
