"""Conector HTTP para a API BMP."""

from api.connectors.bmp.http_base import (
    HttpClient,
    HttpClientConfig,
    HttpResponse,
    MediaFile,
    compute_backoff_seconds,
    is_retryable_status,
)
from api.connectors.bmp.http_client import BmpHttpClient, create_bmp_http_client

__all__ = [
    "BmpHttpClient",
    "HttpClient",
    "HttpClientConfig",
    "HttpResponse",
    "MediaFile",
    "compute_backoff_seconds",
    "create_bmp_http_client",
    "is_retryable_status",
]
