"""Builders para mensagens interativas (lista e botões)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def normalize_list_rows(rows: Iterable[str | Mapping[str, Any]]) -> list[Any]:
    """Converte linhas informadas como string pura em `{"title": ...}`.

    Linhas que já são objetos passam intactas para a validação.
    """
    return [{"title": row} if isinstance(row, str) else row for row in rows]


def build_list_fields(
    text: str,
    list_title: str,
    list_data: Iterable[str | Mapping[str, Any]],
) -> dict[str, Any]:
    """Campos específicos da variante `list`."""
    return {
        "type": "list",
        "text": text,
        "listTitle": list_title,
        "listData": normalize_list_rows(list_data),
    }


def build_button_fields(
    text: str,
    buttons: Iterable[str],
    header_type: str | None = None,
    header: str | None = None,
    footer: str | None = None,
) -> dict[str, Any]:
    """Campos específicos da variante `button`."""
    return {
        "type": "button",
        "text": text,
        "buttons": list(buttons),
        "headerType": header_type,
        "header": header,
        "footer": footer,
    }
