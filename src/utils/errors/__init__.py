"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FatalConfigError,
    GatewayError,
    MediaFileError,
    NetworkError,
    TerminalHttpError,
    ValidationError,
)

__all__ = [
    "FatalConfigError",
    "GatewayError",
    "MediaFileError",
    "NetworkError",
    "TerminalHttpError",
    "ValidationError",
]
