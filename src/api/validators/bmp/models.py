"""Schemas de payload por variante de mensagem BMP.

Todos os modelos rejeitam campos desconhecidos (extra="forbid").
Nomes de campo no fio são camelCase (alias gerado); `from` usa alias
explícito por ser palavra reservada.

Variantes "template" compartilham o mesmo `type` e só se distinguem
por `templateName`; a ordem de tentativa fica em ANY_PAYLOAD_MODELS.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from api.validators.bmp.limits import (
    MAX_BUTTON_LABEL_LENGTH,
    MAX_BUTTONS,
    MAX_FOOTER_LENGTH,
    MAX_HEADER_LENGTH,
    MAX_LIST_ROWS,
    MAX_LIST_TITLE_LENGTH,
    MAX_ROW_DESCRIPTION_LENGTH,
    MAX_ROW_TITLE_LENGTH,
    MAX_TEXT_LENGTH,
    MIN_BUTTONS,
    MIN_LIST_ROWS,
)
from utils.urls import is_http_url

MediaType = Literal["image", "video", "audio", "document"]


def _check_url(value: str) -> str:
    if not is_http_url(value):
        raise ValueError("must be a valid http(s) URL")
    return value


UrlStr = Annotated[str, AfterValidator(_check_url)]
ButtonLabel = Annotated[str, Field(min_length=1, max_length=MAX_BUTTON_LABEL_LENGTH)]


class EnvelopeModel(BaseModel):
    """Campos de roteamento presentes em todo payload."""

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    platform: str
    from_: str = Field(..., alias="from")
    to: str
    channel: str | None = None


class TextPayload(EnvelopeModel):
    type: Literal["text"]
    text: str = Field(..., min_length=1)


class ListRow(BaseModel):
    """Linha de lista interativa."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=MAX_ROW_TITLE_LENGTH)
    description: str | None = Field(default=None, max_length=MAX_ROW_DESCRIPTION_LENGTH)


class ListPayload(EnvelopeModel):
    type: Literal["list"]
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)
    list_title: str = Field(..., min_length=1, max_length=MAX_LIST_TITLE_LENGTH)
    list_data: list[ListRow] = Field(..., min_length=MIN_LIST_ROWS, max_length=MAX_LIST_ROWS)


class ButtonPayload(EnvelopeModel):
    """Mensagem com 1 a 3 botões de resposta rápida.

    `header` é texto ou URL de imagem, conforme `headerType`.
    """

    type: Literal["button"]
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)
    buttons: list[ButtonLabel] = Field(..., min_length=MIN_BUTTONS, max_length=MAX_BUTTONS)
    header_type: Literal["text", "image"] | None = None
    header: str | None = Field(default=None, min_length=1, max_length=MAX_HEADER_LENGTH)
    footer: str | None = Field(default=None, min_length=1, max_length=MAX_FOOTER_LENGTH)

    @field_validator("buttons")
    @classmethod
    def _buttons_unique(cls, buttons: list[str]) -> list[str]:
        if len({label.strip().lower() for label in buttons}) != len(buttons):
            raise ValueError("Button titles must be unique (case-insensitive)")
        return buttons


class MediaPayload(EnvelopeModel):
    """Mídia por link; arquivos locais usam MediaUploadForm."""

    type: Literal["media"]
    media_type: MediaType
    media_url: UrlStr
    text: str | None = None


class ProductPayload(EnvelopeModel):
    type: Literal["product"]
    catalog_id: str = Field(..., min_length=1)
    product_id: str = Field(..., min_length=1)
    text: str | None = None
    footer: str | None = None


class TemplatePayload(EnvelopeModel):
    type: Literal["template"]
    template_lang: Literal["en"]
    template_name: Literal["cnc_booking_data"]
    header_type: Literal["text"]


class TemplateCarouselElement(BaseModel):
    """Elemento (header ou body) de um card de carrossel."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["header", "body"]
    format: str | None = None
    media_url: UrlStr | None = None
    text: str | None = None
    parameters: list[Any]
    buttons: list[Any]
    url: str | None = None
    phone_number: str | None = None


CarouselCard = tuple[TemplateCarouselElement, TemplateCarouselElement]


class _CarouselTemplateBase(EnvelopeModel):
    type: Literal["template"]
    template_lang: Literal["en"]
    header_type: Literal["text"]
    template_carousel_cards: list[CarouselCard] = Field(..., min_length=1)
    template_data: list[Any]
    template_button: list[list[Any]]


class TemplateCarouselPayload(_CarouselTemplateBase):
    template_name: Literal["cnc_botai_carousel_2"]


class TemplateCarousel3Payload(_CarouselTemplateBase):
    template_name: Literal["cnc_carouselx_3_a"]


class TemplateCarousel4Payload(_CarouselTemplateBase):
    template_name: Literal["cnc_carouselx_4_a"]


class TemplateCarousel5Payload(_CarouselTemplateBase):
    template_name: Literal["cnc_carouselx_5_a"]


class MediaUploadForm(EnvelopeModel):
    """Campos de formulário do envio multipart (o arquivo vai à parte)."""

    media_type: MediaType
    text: str | None = None


# Ordem de desambiguação: primeira correspondência estrutural vence
ANY_PAYLOAD_MODELS: tuple[type[EnvelopeModel], ...] = (
    TextPayload,
    ListPayload,
    ButtonPayload,
    MediaPayload,
    ProductPayload,
    TemplatePayload,
    TemplateCarousel5Payload,
    TemplateCarousel4Payload,
    TemplateCarousel3Payload,
    TemplateCarouselPayload,
)


__all__ = [
    "ANY_PAYLOAD_MODELS",
    "ButtonPayload",
    "EnvelopeModel",
    "ListPayload",
    "ListRow",
    "MediaPayload",
    "MediaType",
    "MediaUploadForm",
    "ProductPayload",
    "TemplateCarousel3Payload",
    "TemplateCarousel4Payload",
    "TemplateCarousel5Payload",
    "TemplateCarouselElement",
    "TemplateCarouselPayload",
    "TemplatePayload",
    "TextPayload",
    "UrlStr",
]
