"""Cliente HTTP especializado para a API BMP.

Estende HttpClient genérico com comportamentos específicos do BMP:
- Endpoints /message (JSON) e /message/media (multipart)
- Header Authorization com exatamente um prefixo "Bearer "
- Logging sem token e com MSISDN mascarado
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.bmp.http_base import (
    HttpClient,
    HttpClientConfig,
    HttpResponse,
    MediaFile,
)
from utils.masking import bearer_header

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    from config.settings import BmpSettings

logger: logging.Logger = logging.getLogger(__name__)


class BmpHttpClient(HttpClient):
    """Cliente HTTP para a API BMP."""

    def __init__(
        self,
        settings: BmpSettings,
        config: HttpClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        """Inicializa cliente BMP.

        Args:
            settings: Settings imutáveis (URL base, token, limites)
            config: Configuração HTTP; derivada de settings se None
            transport: Transport httpx alternativo (testes)
            sleep: Função de espera do backoff (testes)
        """
        super().__init__(
            config
            or HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                max_attempts=settings.retry_max_attempts,
            ),
            transport=transport,
            sleep=sleep,
        )
        self._settings = settings

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": bearer_header(self._settings.access_token)}

    async def send_message(self, payload: dict[str, Any]) -> HttpResponse:
        """Envia payload JSON já validado para /message.

        Raises:
            TerminalHttpError: Status terminal ou retentável esgotado
            NetworkError: Timeout/conexão esgotados
        """
        return await self.post_json(
            self._settings.messages_endpoint,
            json=payload,
            headers=self._auth_headers(),
            recipient=payload.get("to"),
        )

    async def send_media(self, fields: dict[str, str], file: MediaFile) -> HttpResponse:
        """Envia arquivo + campos de formulário para /message/media."""
        return await self.post_multipart(
            self._settings.media_endpoint,
            data=fields,
            file=file,
            headers=self._auth_headers(),
            recipient=fields.get("to"),
        )


def create_bmp_http_client(
    settings: BmpSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    sleep: Callable[[float], Awaitable[None]] | None = None,
) -> BmpHttpClient:
    """Factory para criar cliente BMP a partir das settings."""
    logger.debug(
        "bmp_http_client_created",
        extra={
            "timeout_ms": settings.request_timeout_ms,
            "max_attempts": settings.retry_max_attempts,
        },
    )
    return BmpHttpClient(settings, transport=transport, sleep=sleep)
