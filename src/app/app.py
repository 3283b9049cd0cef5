"""Entrypoint do gateway BMP.

Expõe as tools de envio via HTTP (FastAPI).

Uso (produção):
    bmp-gateway

Uso (desenvolvimento):
    uvicorn app.app:create_app --factory --reload --port 3000

Configuração inválida encerra o processo com status 1 antes de servir.
"""

from __future__ import annotations

import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request

from api.routes import create_api_router
from app.bootstrap import create_messaging_service, initialize_app, load_runtime_settings
from app.observability.correlation import (
    CORRELATION_HEADER,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from utils.errors import FatalConfigError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

    from app.use_cases.messaging import MessagingService
    from config.settings import BmpSettings

logger = get_logger(__name__)


def create_app(
    settings: BmpSettings | None = None,
    messaging_service: MessagingService | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        settings: Settings já validadas; carregadas do ambiente se None.
        messaging_service: Fachada pronta (testes); montada no startup se None.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        if app.state.messaging_service is None:
            runtime_settings = settings or load_runtime_settings()
            app.state.messaging_service = create_messaging_service(runtime_settings)
        logger.info("app_starting", extra={"component": "app"})
        yield
        logger.info("app_shutting_down", extra={"component": "app"})

    fastapi_app = FastAPI(
        title="BMP Messaging Gateway",
        description="Envio de mensagens multi-modais para a plataforma BMP",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.state.messaging_service = messaging_service

    @fastapi_app.middleware("http")
    async def correlation_middleware(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            return await call_next(request)
        finally:
            reset_correlation_id(token)

    fastapi_app.include_router(create_api_router())
    return fastapi_app


def main() -> None:
    """Carrega settings, configura logging e sobe o servidor HTTP."""
    import uvicorn

    initialize_app()
    try:
        settings = load_runtime_settings()
    except FatalConfigError:
        # load_runtime_settings já logou os campos inválidos
        sys.exit(1)

    initialize_app(settings)
    logger.info("server_listening", extra={"port": settings.port})
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
