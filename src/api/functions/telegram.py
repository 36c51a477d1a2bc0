"""Handler do relay de leads para funções no formato AWS Lambda.

Atende Netlify Functions e API Gateway (payload v1 e v2):
    event = {"httpMethod": "POST", "headers": {...}, "body": "...",
             "isBase64Encoded": false}

Retorna {"statusCode", "headers", "body"}. Adapter fino: toda a regra está
em app.coordinators.telegram.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from typing import Any

from app.bootstrap import create_telegram_sender, initialize_app
from app.coordinators.telegram import handle_relay_request
from app.observability import CORRELATION_HEADER, correlation_context
from config.settings import load_telegram_settings

# Cold start: configura logging uma vez por container
initialize_app()

logger = logging.getLogger(__name__)


def _extract_method(event: dict[str, Any]) -> str:
    method = event.get("httpMethod")
    if method:
        return str(method)
    # API Gateway HTTP API (payload v2)
    request_context = event.get("requestContext") or {}
    http = request_context.get("http") or {}
    return str(http.get("method") or "")


def _extract_body(event: dict[str, Any]) -> bytes | str | None:
    body = event.get("body")
    if body is None or not event.get("isBase64Encoded"):
        return body
    try:
        return base64.b64decode(body)
    except (binascii.Error, ValueError):
        # Segue como texto: o parse de JSON devolve 400
        logger.warning("lambda_body_base64_invalid")
        return body


def _extract_correlation_id(event: dict[str, Any], context: Any) -> str | None:
    headers = event.get("headers") or {}
    for key, value in headers.items():
        if key.lower() == CORRELATION_HEADER and value:
            return str(value)
    return getattr(context, "aws_request_id", None)


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Entrypoint da função (exports.handler no Netlify)."""
    with correlation_context(_extract_correlation_id(event, context)):
        result = asyncio.run(
            handle_relay_request(
                _extract_method(event),
                _extract_body(event),
                load_telegram_settings(),
                create_telegram_sender,
            )
        )

    return {
        "statusCode": result.status_code,
        "headers": result.headers,
        "body": result.body,
    }
