"""Exceções do gateway BMP.

Taxonomia:
- ValidationError: payload fora do schema (nenhuma chamada de rede ocorre)
- TerminalHttpError: status não retentável ou retentável esgotado
- NetworkError: timeout/conexão esgotados após todas as tentativas
- MediaFileError: arquivo local ilegível (falha antes da primeira tentativa)
- FatalConfigError: configuração inválida no startup
"""

from __future__ import annotations

from typing import Any


class GatewayError(RuntimeError):
    """Base para falhas do gateway de mensagens."""


class ValidationError(GatewayError):
    """Payload não satisfaz o schema da variante de mensagem."""

    def __init__(
        self,
        message: str,
        violations: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.violations = violations or []


class TerminalHttpError(GatewayError):
    """Status HTTP não retentável, ou retentável após esgotar tentativas."""

    def __init__(
        self,
        status_code: int,
        body: Any,
        attempts: int = 1,
    ) -> None:
        super().__init__(f"HTTP {status_code} after {attempts} attempt(s)")
        self.status_code = status_code
        self.body = body
        self.attempts = attempts


class NetworkError(GatewayError):
    """Timeout ou falha de conexão após esgotar tentativas."""

    def __init__(self, cause: str, attempts: int) -> None:
        super().__init__(f"network failure after {attempts} attempt(s): {cause}")
        self.cause = cause
        self.attempts = attempts


class MediaFileError(GatewayError):
    """Arquivo de mídia não pôde ser lido do disco."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(f"cannot read media file {file_path}: {reason}")
        self.file_path = file_path
        self.reason = reason


class FatalConfigError(GatewayError):
    """Configuração inválida no startup; o processo não deve servir."""

    def __init__(self, errors: list[str]) -> None:
        details = "\n".join(f"- {error}" for error in errors)
        super().__init__(f"Configuração inválida:\n{details}")
        self.errors = list(errors)
