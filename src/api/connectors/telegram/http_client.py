"""Cliente HTTP especializado para a Telegram Bot API.

Estende HttpClient genérico com comportamentos específicos do Telegram:
- Endpoint com token no path (/bot<token>/sendMessage)
- Sucesso somente quando o JSON traz `ok: true`
- Tratamento de erros da Bot API (error_code, description)
- Logging estruturado sem token, texto ou chat_id completo

Toda falha vira utils.errors.TransportError para que o fan-out isole o
destinatário.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.telegram.bot_errors import parse_bot_error
from api.connectors.telegram.bot_logging import log_bot_error, log_success
from api.payload_builders.telegram import TextPayloadBuilder
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from utils.errors import TransportError

if TYPE_CHECKING:
    import httpx

    from config.settings import TelegramSettings

logger: logging.Logger = logging.getLogger(__name__)

SEND_MESSAGE_METHOD = "sendMessage"


class TelegramHttpClient(HttpClient):
    """Cliente HTTP para o método sendMessage da Bot API."""

    def __init__(
        self,
        bot_token: str,
        api_base_url: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente Telegram.

        Args:
            bot_token: Token do bot (nunca logado)
            api_base_url: URL base da Bot API
            config: Configuração HTTP base
            transport: Transport httpx alternativo (testes)
        """
        super().__init__(config, transport=transport)
        if not bot_token or not bot_token.strip():
            raise ValueError("bot_token é obrigatório para envio de mensagens")
        self._bot_token = bot_token
        self._api_base_url = api_base_url.rstrip("/")
        self._builder = TextPayloadBuilder()

    def _endpoint(self, method: str) -> str:
        return f"{self._api_base_url}/bot{self._bot_token}/{method}"

    async def send_message(self, chat_id: str, text: str) -> dict[str, Any]:
        """Envia mensagem HTML para um chat.

        Returns:
            Response JSON da Bot API (`ok: true`)

        Raises:
            TransportError: Falha de rede, timeout, resposta inválida ou
                `ok` diferente de true.
        """
        payload = self._builder.build(chat_id, text)
        try:
            response = await self.post(
                self._endpoint(SEND_MESSAGE_METHOD),
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except HttpError as exc:
            raise TransportError(str(exc)) from exc

        return self._process_bot_response(response)

    def _process_bot_response(self, response: httpx.Response) -> dict[str, Any]:
        """Valida response da Bot API."""
        try:
            response_data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.error(
                "Response JSON inválido",
                extra={"status_code": response.status_code},
            )
            raise TransportError(
                "telegram_invalid_json",
                status_code=response.status_code,
            ) from exc

        if not isinstance(response_data, dict):
            raise TransportError(
                "telegram_response_not_object",
                status_code=response.status_code,
            )

        bot_error = parse_bot_error(response_data)
        if bot_error:
            log_bot_error(bot_error, SEND_MESSAGE_METHOD, response.status_code)
            raise TransportError(
                f"Telegram API error: {bot_error.description}",
                status_code=response.status_code,
                error_code=bot_error.error_code,
            )

        log_success(SEND_MESSAGE_METHOD, response.status_code)
        return response_data


def create_telegram_http_client(
    settings: TelegramSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TelegramHttpClient:
    """Factory para criar cliente Telegram a partir das settings da invocação."""
    config = HttpClientConfig(timeout_seconds=settings.request_timeout_seconds)
    return TelegramHttpClient(
        bot_token=settings.bot_token,
        api_base_url=settings.api_base_url,
        config=config,
        transport=transport,
    )
