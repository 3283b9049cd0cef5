"""Filters de logging para injeção de contexto e redação.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: bmp_gateway)

Campos removidos:
- authorization, access_token, token, headers
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from utils.masking import SENSITIVE_FIELDS

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldsFilter(logging.Filter):
    """Remove do record atributos que carregam credenciais."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field_name in SENSITIVE_FIELDS:
            if field_name in record.__dict__:
                del record.__dict__[field_name]
        return True
