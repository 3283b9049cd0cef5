"""Formatter JSON das linhas de log do gateway.

Cada linha é um objeto com o evento (message), nível, logger de origem,
correlation_id da chamada de tool e nome do serviço. Os campos extra dos
eventos BMP (attempt, status, to, delay_s) entram no mesmo objeto.

Timestamps saem em UTC no formato ISO-8601 com milissegundos e texto em
português (legendas, erros de validação) não é escapado.
"""

from __future__ import annotations

import logging
import time

from pythonjsonlogger.json import JsonFormatter

# Ordem dos campos fixos em cada linha
LOG_FIELD_ORDER = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)
REQUIRED_LOG_FIELDS = frozenset(LOG_FIELD_ORDER)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


class GatewayJsonFormatter(JsonFormatter):
    """JsonFormatter com timestamp UTC (ex: 2026-02-02T10:30:00.123Z)."""

    converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        stamp = time.strftime(datefmt or TIMESTAMP_FORMAT, self.converter(record.created))
        return f"{stamp}.{int(record.msecs):03d}Z"


def create_json_formatter() -> GatewayJsonFormatter:
    """Cria o formatter das linhas de log.

    Exemplo de output:
        {
            "timestamp": "2026-02-02T10:30:00.123Z",
            "level": "WARNING",
            "logger": "api.connectors.bmp.http_base",
            "message": "bmp_request_failed",
            "correlation_id": "abc-123",
            "service": "bmp_gateway",
            "attempt": 1,
            "status": 503,
            "to": "********3073"
        }
    """
    return GatewayJsonFormatter(
        " ".join(f"%({field})s" for field in LOG_FIELD_ORDER),
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
