"""Relay de leads: requisição HTTP → normalização → fan-out → resposta.

Lógica de borda independente de hospedagem. Os adapters (rota FastAPI e
handler Lambda/Netlify) só traduzem o formato da plataforma para
handle_relay_request e de volta.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.observability import record_latency
from app.services.message_normalizer import INVALID_BODY, normalize_message
from app.services.recipient_resolver import resolve_recipients
from app.use_cases.telegram import RelayLeadNotificationUseCase
from utils.errors import ConfigurationError, MethodError, ParseError, RelayError

if TYPE_CHECKING:
    from collections.abc import Callable
    from contextlib import AbstractAsyncContextManager
    from datetime import datetime

    from app.protocols.telegram_sender import TelegramSenderProtocol
    from config.settings import TelegramSettings

    SenderFactory = Callable[
        [TelegramSettings],
        AbstractAsyncContextManager[TelegramSenderProtocol],
    ]

logger = logging.getLogger(__name__)

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

METHOD_NOT_ALLOWED = "Method not allowed"
MISSING_CONFIGURATION = "TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_IDS must be set"
INVALID_CONFIGURATION = "Invalid configuration"
INTERNAL_ERROR = "Internal server error"

DEPLOYMENT_CHECK_HTML = (
    '<!DOCTYPE html><html><head><meta charset="utf-8"><title>API</title></head>'
    '<body style="font-family:sans-serif;padding:2rem;background:#f5f5f5;color:#111;">'
    "<h1>API работает</h1>"
    "<p>Функция Telegram задеплоена. Отправьте форму на главной странице — "
    "заявка придёт в Telegram.</p>"
    '<p><a href="/">Вернуться на сайт</a></p>'
    "</body></html>"
)


@dataclass(frozen=True, slots=True)
class RelayHttpResponse:
    """Resposta HTTP neutra (status, headers, corpo em texto)."""

    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    @classmethod
    def json(cls, status_code: int, payload: dict[str, Any]) -> RelayHttpResponse:
        return cls(
            status_code=status_code,
            body=json.dumps(payload, ensure_ascii=False),
            headers={**CORS_HEADERS, "Content-Type": "application/json"},
        )

    @classmethod
    def error(cls, status_code: int, message: str) -> RelayHttpResponse:
        return cls.json(status_code, {"ok": False, "error": message})

    @classmethod
    def html(cls, status_code: int, document: str) -> RelayHttpResponse:
        return cls(
            status_code=status_code,
            body=document,
            headers={**CORS_HEADERS, "Content-Type": "text/html; charset=utf-8"},
        )


def parse_request_body(body: bytes | str | Mapping[str, Any] | None) -> dict[str, Any]:
    """Converte o corpo recebido da plataforma em dict.

    Corpo ausente ou vazio vale como `{}`; plataformas que já entregam o JSON
    decodificado passam um Mapping.

    Raises:
        ParseError: JSON inválido ou que não seja objeto.
    """
    if body is None:
        return {}
    if isinstance(body, Mapping):
        return dict(body)

    try:
        raw = body.decode("utf-8") if isinstance(body, bytes) else body
        if not raw.strip():
            return {}
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ParseError(INVALID_BODY) from exc

    if not isinstance(payload, dict):
        raise ParseError(INVALID_BODY)
    return payload


async def handle_relay_request(
    method: str,
    body: bytes | str | Mapping[str, Any] | None,
    settings: TelegramSettings,
    sender_factory: SenderFactory,
    *,
    now: datetime | None = None,
) -> RelayHttpResponse:
    """Processa uma invocação do relay.

    Args:
        method: Método HTTP da requisição
        body: Corpo bruto (ou já decodificado) da requisição
        settings: Settings lidas do ambiente nesta invocação
        sender_factory: Cria o sender (context manager) a partir das settings
        now: Momento usado no cabeçalho da notificação (testes)

    Returns:
        RelayHttpResponse com CORS em todos os casos.
    """
    method = (method or "").upper()

    if method == "OPTIONS":
        return RelayHttpResponse(status_code=200)

    if method == "GET":
        return RelayHttpResponse.html(200, DEPLOYMENT_CHECK_HTML)

    started_at = time.perf_counter()
    try:
        return await _relay(method, body, settings, sender_factory, now=now)
    except RelayError as exc:
        logger.info(
            "relay_request_rejected",
            extra={
                "status_code": exc.status_code,
                "error_type": type(exc).__name__,
            },
        )
        return RelayHttpResponse.error(exc.status_code, str(exc))
    except Exception:
        logger.exception("relay_request_failed")
        return RelayHttpResponse.error(500, INTERNAL_ERROR)
    finally:
        record_latency(
            "relay",
            "handle_request",
            (time.perf_counter() - started_at) * 1000,
        )


async def _relay(
    method: str,
    body: bytes | str | Mapping[str, Any] | None,
    settings: TelegramSettings,
    sender_factory: SenderFactory,
    *,
    now: datetime | None,
) -> RelayHttpResponse:
    if method != "POST":
        raise MethodError(METHOD_NOT_ALLOWED)

    # Configuração é checada antes do corpo
    if not settings.is_configured:
        raise ConfigurationError(MISSING_CONFIGURATION)

    invalid = settings.invalid_variables()
    if invalid:
        raise ConfigurationError(f"{INVALID_CONFIGURATION}: {', '.join(invalid)}")

    payload = parse_request_body(body)
    message = normalize_message(payload, now=now, timezone=settings.timezone)
    chat_ids = resolve_recipients(settings.chat_ids)

    async with sender_factory(settings) as sender:
        result = await RelayLeadNotificationUseCase(sender).execute(message, chat_ids)

    return RelayHttpResponse.json(200, result.as_response())
