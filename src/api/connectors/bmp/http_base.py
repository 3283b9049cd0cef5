"""Cliente HTTP base com retry, backoff e timeout por tentativa.

Duas entradas (JSON e multipart) compartilham o mesmo algoritmo:
- tentativas limitadas por `max_attempts` (iteração explícita)
- cada tentativa limitada por `timeout_seconds`
- 429, 408 e 5xx são retentáveis; demais 4xx são terminais
- falhas de transporte (timeout, conexão) são retentáveis
- backoff determinístico: min(base * 2^(attempt-1), max), sem jitter
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from utils.errors import NetworkError, TerminalHttpError
from utils.masking import mask_recipient

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({408, 429})


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 15.0
    max_attempts: int = 3
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 5.0
    default_headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class MediaFile:
    """Arquivo já carregado em memória para envio multipart."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class HttpResponse:
    """Resposta normalizada: status HTTP e corpo parseado."""

    status: int
    data: dict[str, Any]


def is_retryable_status(status_code: int) -> bool:
    """True para 408, 429 e 5xx."""
    return status_code in RETRYABLE_STATUS_CODES or status_code >= 500


def compute_backoff_seconds(attempt: int, base: float, max_seconds: float) -> float:
    """Delay antes da próxima tentativa (attempt é 1-indexado)."""
    return min(base * (2 ** (attempt - 1)), max_seconds)


def parse_body(response: httpx.Response) -> dict[str, Any]:
    """Parse best-effort do corpo; corpo ilegível vira dict vazio."""
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return data if isinstance(data, dict) else {"data": data}


class HttpClient:
    """Cliente HTTP com retry limitado para chamadas POST."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport
        self._sleep = sleep or asyncio.sleep

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def post_json(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
        *,
        recipient: str | None = None,
    ) -> HttpResponse:
        """POST com corpo JSON."""
        merged_headers = {
            **self._config.default_headers,
            "Content-Type": "application/json",
            **(headers or {}),
        }

        async def _send(client: httpx.AsyncClient) -> httpx.Response:
            return await client.post(url, json=json, headers=merged_headers)

        return await self._send_with_retry(_send, url=url, recipient=recipient)

    async def post_multipart(
        self,
        url: str,
        data: dict[str, str],
        file: MediaFile,
        headers: dict[str, str] | None = None,
        *,
        recipient: str | None = None,
    ) -> HttpResponse:
        """POST multipart; o corpo é reconstruído a partir dos mesmos bytes a cada tentativa.

        Content-Type não é definido aqui: httpx calcula o boundary.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}

        async def _send(client: httpx.AsyncClient) -> httpx.Response:
            files = {"file": (file.filename, file.content, file.content_type)}
            return await client.post(url, data=data, files=files, headers=merged_headers)

        return await self._send_with_retry(_send, url=url, recipient=recipient)

    async def _send_with_retry(
        self,
        send: Callable[[httpx.AsyncClient], Awaitable[httpx.Response]],
        *,
        url: str,
        recipient: str | None,
    ) -> HttpResponse:
        max_attempts = self._config.max_attempts
        last_error: TerminalHttpError | NetworkError | None = None

        for attempt in range(1, max_attempts + 1):
            try:
                response = await self._attempt(send)
            except (TimeoutError, httpx.TransportError) as exc:
                cause = str(exc) or type(exc).__name__
                _log_failed_attempt(
                    attempt, max_attempts, url, recipient, error_type=type(exc).__name__
                )
                last_error = NetworkError(cause, attempts=attempt)
            else:
                data = parse_body(response)
                if response.is_success:
                    logger.debug(
                        "bmp_request_succeeded",
                        extra={
                            "endpoint": url,
                            "status_code": response.status_code,
                            "attempt": attempt,
                        },
                    )
                    return HttpResponse(status=response.status_code, data=data)

                _log_failed_attempt(
                    attempt, max_attempts, url, recipient, status_code=response.status_code
                )
                last_error = TerminalHttpError(response.status_code, data, attempts=attempt)
                if not is_retryable_status(response.status_code):
                    raise last_error

            if attempt < max_attempts:
                await self._backoff(attempt)

        if last_error is None:
            raise NetworkError("no attempts configured", attempts=0)
        raise last_error

    async def _attempt(
        self,
        send: Callable[[httpx.AsyncClient], Awaitable[httpx.Response]],
    ) -> httpx.Response:
        timeout = self._config.timeout_seconds
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            return await asyncio.wait_for(send(client), timeout=timeout)

    async def _backoff(self, attempt: int) -> None:
        delay = compute_backoff_seconds(
            attempt,
            self._config.backoff_base_seconds,
            self._config.backoff_max_seconds,
        )
        logger.info("bmp_backoff", extra={"attempt": attempt, "backoff_seconds": delay})
        await self._sleep(delay)


def _log_failed_attempt(
    attempt: int,
    max_attempts: int,
    url: str,
    recipient: str | None,
    *,
    status_code: int | None = None,
    error_type: str | None = None,
) -> None:
    logger.warning(
        "bmp_request_failed",
        extra={
            "endpoint": url,
            "attempt": attempt,
            "max_attempts": max_attempts,
            "to": mask_recipient(recipient),
            "status_code": status_code,
            "error_type": error_type,
        },
    )
