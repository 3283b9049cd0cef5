"""Modelos de entrada das tools de envio.

Os nomes de campo seguem o contrato público das tools (camelCase).
Limites estruturais dos payloads (tamanhos, cardinalidade, unicidade)
são aplicados pelos schemas em api.validators.bmp.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from api.validators.bmp.limits import MIN_RECIPIENT_LENGTH
from api.validators.bmp.models import UrlStr


class ToolInput(BaseModel):
    """Base dos argumentos de tool: destinatário obrigatório."""

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    to: str = Field(
        ...,
        min_length=MIN_RECIPIENT_LENGTH,
        description="Recipient phone number (MSISDN), e.g. 628116823073",
    )


class SendTextInput(ToolInput):
    text: str = Field(..., min_length=1, description="Plain text message body")


class ListRowInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., description="Row title (<=24 chars)")
    description: str | None = Field(
        default=None, description="Optional row description (<=72 chars)"
    )


class SendListInput(ToolInput):
    text: str = Field(..., description="Intro text shown above the list")
    list_title: str = Field(..., description="Title displayed on the selection sheet")
    list_data: list[ListRowInput | str] = Field(..., description="1-10 list rows")


class SendButtonInput(ToolInput):
    text: str = Field(..., description="Message text shown above buttons")
    buttons: list[str] = Field(..., description="1-3 unique buttons (<=20 chars)")
    header_type: Literal["text", "image"] | None = Field(
        default=None,
        description='Header type; "text" or "image" (image uses header as URL)',
    )
    header: str | None = Field(default=None, description="Header text or image URL")
    footer: str | None = Field(default=None, description="Optional footer text")


class SendImageInput(ToolInput):
    media_url: UrlStr = Field(..., description="Publicly accessible image URL")
    text: str | None = Field(default=None, description="Optional caption")


class SendImageUrlListInput(ToolInput):
    media_urls: list[UrlStr] = Field(
        ..., min_length=1, description="List of publicly accessible image URLs"
    )


class SendFileInput(ToolInput):
    file_path: str = Field(
        ..., min_length=1, description="Absolute or relative path to the file"
    )
    text: str | None = Field(default=None, description="Optional caption")


class SendProductInput(ToolInput):
    catalog_id: str = Field(..., min_length=1, description="Catalog identifier")
    product_id: str = Field(
        ..., min_length=1, description="Product identifier within the catalog"
    )
    text: str | None = Field(default=None, description="Optional product intro text")
    footer: str | None = Field(default=None, description="Optional footer text")


def row_to_dict(row: ListRowInput | str) -> str | dict[str, Any]:
    """Linha de lista no formato aceito pela fachada."""
    if isinstance(row, str):
        return row
    return row.model_dump(exclude_none=True)
