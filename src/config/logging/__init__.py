"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="info", service_name="bmp_gateway")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("tool_completed", extra={"tool": "send_text"})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- timestamp (UTC, ISO-8601)

Logs nunca carregam token nem MSISDN completo.
"""

from config.logging.config import (
    VALID_LOG_LEVELS,
    configure_logging,
    get_logger,
    normalize_log_level,
)
from config.logging.filters import CorrelationIdFilter, SensitiveFieldsFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    GatewayJsonFormatter,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "GatewayJsonFormatter",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldsFilter",
    "VALID_LOG_LEVELS",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "normalize_log_level",
]
