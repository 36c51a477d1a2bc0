"""Exceções do relay de leads.

Cada exceção carrega o status HTTP que a borda deve devolver. O mapeamento
status → resposta é aplicado em um único ponto
(app/coordinators/telegram/relay_handler.py).
"""

from __future__ import annotations


class RelayError(Exception):
    """Base para erros que abortam a requisição do relay."""

    status_code: int = 500


class ValidationError(RelayError):
    """Payload do formulário sem mensagem derivável."""

    status_code = 400


class ParseError(RelayError):
    """Corpo da requisição não é um objeto JSON válido."""

    status_code = 400


class MethodError(RelayError):
    """Método HTTP não suportado pelo relay."""

    status_code = 405


class ConfigurationError(RelayError):
    """Token do bot ou lista de chats ausente no servidor."""

    status_code = 500


class TransportError(Exception):
    """Falha ao entregar a mensagem para um único chat.

    Nunca sobe até a borda: o fan-out captura, loga e segue para o
    próximo destinatário.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
