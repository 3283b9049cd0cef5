"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: é o único ponto que lê o ambiente.
Settings imutáveis são construídas aqui e injetadas no cliente HTTP
e na fachada de mensagens.

Uso:
    from app.bootstrap import create_messaging_service, initialize_app, load_runtime_settings

    settings = load_runtime_settings()
    initialize_app(settings)
    service = create_messaging_service(settings)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.bmp import create_bmp_http_client
from app.observability import get_correlation_id
from app.use_cases.messaging import MessagingService
from config.logging import configure_logging
from config.settings import DEFAULT_LOG_LEVEL, load_settings_or_fail
from utils.errors import FatalConfigError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    from config.settings import BmpSettings

# Nome do serviço para logs
SERVICE_NAME = "bmp_gateway"

logger = logging.getLogger(__name__)


def initialize_app(settings: BmpSettings | None = None) -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    configure_logging(
        level=settings.log_level if settings else DEFAULT_LOG_LEVEL,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def load_runtime_settings() -> BmpSettings:
    """Carrega e valida settings do ambiente; falha rápido se inválidas.

    Raises:
        FatalConfigError: Com a lista de campos ausentes/inválidos.
    """
    try:
        settings = load_settings_or_fail()
    except FatalConfigError as exc:
        logger.error(
            "settings_invalid",
            extra={
                "component": "bootstrap",
                "error_count": len(exc.errors),
                "errors": exc.errors,
            },
        )
        raise
    logger.info(
        "settings_validated",
        extra={"component": "bootstrap", "result": "ok", "platform": settings.platform},
    )
    return settings


def create_messaging_service(
    settings: BmpSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    sleep: Callable[[float], Awaitable[None]] | None = None,
) -> MessagingService:
    """Monta a fachada de mensagens com cliente BMP configurado."""
    client = create_bmp_http_client(settings, transport=transport, sleep=sleep)
    return MessagingService(settings, client)
