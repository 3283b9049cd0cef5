"""Envelope comum (platform, from, to, channel?) dos payloads BMP."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings import BmpSettings


def build_envelope(settings: BmpSettings, to: str) -> dict[str, str]:
    """Monta envelope de roteamento; `channel` só entra se configurado."""
    envelope = {
        "platform": settings.platform,
        "from": settings.sender_msisdn,
        "to": to,
    }
    if settings.channel:
        envelope["channel"] = settings.channel
    return envelope


def with_envelope(
    settings: BmpSettings,
    to: str,
    fields: Mapping[str, Any],
) -> dict[str, Any]:
    """Mescla envelope com campos da variante; campos None são omitidos.

    Campos do chamador sobrescrevem o envelope em caso de conflito.
    """
    return {
        **build_envelope(settings, to),
        **{key: value for key, value in fields.items() if value is not None},
    }
