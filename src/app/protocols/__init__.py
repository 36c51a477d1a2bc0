"""Protocolos e contratos do core da aplicação."""

from .telegram_sender import TelegramSenderProtocol

__all__ = ["TelegramSenderProtocol"]
