"""Settings do gateway BMP (Business Messaging Platform).

Carregadas uma única vez no startup e repassadas explicitamente
para transporte e fachada. Nenhum módulo do núcleo lê o ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from config.logging.config import VALID_LOG_LEVELS, normalize_log_level
from utils.errors import FatalConfigError
from utils.urls import is_http_url

DEFAULT_REQUEST_TIMEOUT_MS: int = 15000
DEFAULT_RETRY_MAX_ATTEMPTS: int = 3
DEFAULT_LOG_LEVEL: str = "info"
DEFAULT_PORT: int = 3000
MIN_SENDER_MSISDN_LENGTH: int = 5


@dataclass(frozen=True)
class BmpSettings:
    """Configurações do canal BMP.

    Attributes:
        api_base_url: URL base da API (ex: https://bmp.example.com/api/v1)
        access_token: Token de acesso (com ou sem prefixo "Bearer ")
        sender_msisdn: Número remetente usado no campo `from`
        platform: Identificador da plataforma (ex: WA)
        channel: Canal opcional; só entra no envelope quando configurado
        request_timeout_ms: Timeout por tentativa em milissegundos
        retry_max_attempts: Máximo de tentativas por envio
        log_level: Nível de log
        port: Porta do servidor HTTP de tools
    """

    api_base_url: str = ""
    access_token: str = ""
    sender_msisdn: str = ""
    platform: str = ""
    channel: str | None = None

    request_timeout_ms: int = DEFAULT_REQUEST_TIMEOUT_MS
    retry_max_attempts: int = DEFAULT_RETRY_MAX_ATTEMPTS

    log_level: str = DEFAULT_LOG_LEVEL
    port: int = DEFAULT_PORT

    @property
    def request_timeout_seconds(self) -> float:
        """Timeout por tentativa em segundos."""
        return self.request_timeout_ms / 1000

    @property
    def messages_endpoint(self) -> str:
        """URL para envio de mensagens JSON."""
        return f"{self.api_base_url.rstrip('/')}/message"

    @property
    def media_endpoint(self) -> str:
        """URL para envio multipart de arquivos."""
        return f"{self.api_base_url.rstrip('/')}/message/media"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do BMP.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url:
            errors.append("BMP_API_BASE_URL não configurado")
        elif not is_http_url(self.api_base_url):
            errors.append("BMP_API_BASE_URL deve ser uma URL http(s) válida")

        if not self.access_token:
            errors.append("BMP_ACCESS_TOKEN não configurado")

        if len(self.sender_msisdn) < MIN_SENDER_MSISDN_LENGTH:
            errors.append(
                f"BMP_SENDER_MSISDN deve ter ao menos {MIN_SENDER_MSISDN_LENGTH} caracteres"
            )

        if not self.platform:
            errors.append("BMP_PLATFORM não configurado")

        if self.channel is not None and not self.channel:
            errors.append("BMP_CHANNEL não pode ser vazio quando definido")

        if self.request_timeout_ms <= 0:
            errors.append("REQUEST_TIMEOUT_MS deve ser > 0")

        if self.retry_max_attempts < 1:
            errors.append("RETRY_MAX_ATTEMPTS deve ser >= 1")

        if self.port <= 0:
            errors.append("PORT deve ser > 0")

        if normalize_log_level(self.log_level) is None:
            errors.append(
                f"LOG_LEVEL inválido (recebido: {self.log_level!r}; "
                f"válidos: {', '.join(sorted(VALID_LOG_LEVELS))}, WARN)"
            )

        return errors


def _parse_int(name: str, default: int, errors: list[str]) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        errors.append(f"{name} deve ser inteiro (recebido: {raw!r})")
        return default


def load_settings_or_fail() -> BmpSettings:
    """Carrega BmpSettings do ambiente e valida.

    Raises:
        FatalConfigError: Com todos os campos ausentes ou inválidos.
    """
    parse_errors: list[str] = []
    channel = os.getenv("BMP_CHANNEL")
    settings = BmpSettings(
        api_base_url=os.getenv("BMP_API_BASE_URL", "").strip(),
        access_token=os.getenv("BMP_ACCESS_TOKEN", "").strip(),
        sender_msisdn=os.getenv("BMP_SENDER_MSISDN", "").strip(),
        platform=os.getenv("BMP_PLATFORM", "").strip(),
        channel=channel.strip() if channel is not None else None,
        request_timeout_ms=_parse_int(
            "REQUEST_TIMEOUT_MS", DEFAULT_REQUEST_TIMEOUT_MS, parse_errors
        ),
        retry_max_attempts=_parse_int(
            "RETRY_MAX_ATTEMPTS", DEFAULT_RETRY_MAX_ATTEMPTS, parse_errors
        ),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip() or DEFAULT_LOG_LEVEL,
        port=_parse_int("PORT", DEFAULT_PORT, parse_errors),
    )
    errors = parse_errors + settings.validate()
    if errors:
        raise FatalConfigError(errors)
    return settings
