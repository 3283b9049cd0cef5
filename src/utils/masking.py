"""Mascaramento de dados sensíveis para logs.

Nunca logar MSISDN completo nem credenciais.
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

# Atributos de LogRecord que nunca devem sair nos logs
SENSITIVE_FIELDS: Final[frozenset[str]] = frozenset(
    {"authorization", "access_token", "token", "headers"}
)

_BEARER_PREFIX: Final[Pattern[str]] = re.compile(r"^Bearer\s+", re.IGNORECASE)


def mask_recipient(recipient: str | None) -> str | None:
    """Mascara MSISDN mantendo apenas os 4 últimos dígitos.

    Exemplos:
        >>> mask_recipient("628116823073")
        '********3073'

        >>> mask_recipient("123")
        '****'
    """
    if not recipient:
        return recipient
    value = str(recipient)
    if len(value) <= 4:
        return "****"
    return "*" * (len(value) - 4) + value[-4:]


def normalize_access_token(token: str) -> str:
    """Remove prefixo "Bearer " (case-insensitive) do token, se houver."""
    return _BEARER_PREFIX.sub("", token.strip())


def bearer_header(token: str) -> str:
    """Monta valor do header Authorization com exatamente um prefixo Bearer."""
    return f"Bearer {normalize_access_token(token)}"
