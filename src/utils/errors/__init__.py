"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    MethodError,
    ParseError,
    RelayError,
    TransportError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "MethodError",
    "ParseError",
    "RelayError",
    "TransportError",
    "ValidationError",
]
