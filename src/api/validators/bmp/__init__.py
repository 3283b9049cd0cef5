"""Validadores de payload para a API BMP.

Uso:
    from api.validators.bmp import TextPayload, validate_payload

    payload = validate_payload(TextPayload, data)
"""

from api.validators.bmp.models import (
    ANY_PAYLOAD_MODELS,
    ButtonPayload,
    EnvelopeModel,
    ListPayload,
    ListRow,
    MediaPayload,
    MediaType,
    MediaUploadForm,
    ProductPayload,
    TemplateCarousel3Payload,
    TemplateCarousel4Payload,
    TemplateCarousel5Payload,
    TemplateCarouselElement,
    TemplateCarouselPayload,
    TemplatePayload,
    TextPayload,
)
from api.validators.bmp.validator import dump_payload, validate_any_payload, validate_payload

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
    "dump_payload",
    "validate_any_payload",
    "validate_payload",
]
