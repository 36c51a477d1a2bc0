"""Cliente HTTP base para conectores externos.

Uma tentativa por chamada: o relay não faz retry, então o timeout
configurado é o limite de cada envio.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_timeout: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_timeout = is_timeout


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Usado como context manager, reaproveita uma única sessão httpx durante a
    invocação; fora dele, abre uma sessão por chamada.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport
        self._session: httpx.AsyncClient | None = None

    def _new_session(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            verify=self._config.verify_ssl,
            timeout=self._config.timeout_seconds,
            headers=self._config.default_headers,
            transport=self._transport,
        )

    async def __aenter__(self) -> HttpClient:
        self._session = self._new_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if self._session is not None:
            await self._session.aclose()
            self._session = None

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST JSON sem retry.

        Raises:
            HttpError: Timeout ou falha de conexão/protocolo.
        """
        try:
            if self._session is not None:
                return await self._session.post(url, json=json, headers=headers)
            async with self._new_session() as session:
                return await session.post(url, json=json, headers=headers)
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout", is_timeout=True) from exc
        except httpx.HTTPError as exc:
            logger.debug("http_transport_error", extra={"error_type": type(exc).__name__})
            raise HttpError("http_connection_error") from exc
