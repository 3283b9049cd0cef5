"""Builders para mensagens de mídia e produto."""

from __future__ import annotations

from typing import Any


def build_text_fields(text: str) -> dict[str, Any]:
    return {"type": "text", "text": text}


def build_media_url_fields(
    media_type: str,
    media_url: str,
    text: str | None = None,
) -> dict[str, Any]:
    """Campos da variante `media` por link (exatamente uma referência: URL)."""
    return {
        "type": "media",
        "mediaType": media_type,
        "mediaUrl": media_url,
        "text": text,
    }


def build_media_form_fields(media_type: str, text: str | None = None) -> dict[str, Any]:
    """Campos de formulário do envio multipart (o arquivo segue à parte)."""
    return {"mediaType": media_type, "text": text or None}


def build_product_fields(
    catalog_id: str,
    product_id: str,
    text: str | None = None,
    footer: str | None = None,
) -> dict[str, Any]:
    return {
        "type": "product",
        "catalogId": catalog_id,
        "productId": product_id,
        "text": text,
        "footer": footer,
    }
