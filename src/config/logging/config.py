"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="info", service_name="bmp_gateway")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.warning("bmp_request_failed", extra={"attempt": 1})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SensitiveFieldsFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Apelidos aceitos em LOG_LEVEL
LOG_LEVEL_ALIASES = {"WARN": "WARNING"}

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "bmp_gateway"


def normalize_log_level(level: str) -> str | None:
    """Nome canônico do nível ("warn" → "WARNING"); None se inválido."""
    level_upper = level.strip().upper()
    level_upper = LOG_LEVEL_ALIASES.get(level_upper, level_upper)
    return level_upper if level_upper in VALID_LOG_LEVELS else None


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização do serviço (app/bootstrap/).

    Args:
        level: Nível de log (case-insensitive; "warn" aceito como WARNING).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = normalize_log_level(level)
    if level_upper is None:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(SensitiveFieldsFilter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)
