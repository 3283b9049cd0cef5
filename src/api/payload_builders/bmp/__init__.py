"""Builders de payload para a API BMP.

Cada builder devolve os campos da variante com nomes do fio; o envelope
é mesclado por `with_envelope` e o resultado segue para validação.
"""

from api.payload_builders.bmp.envelope import build_envelope, with_envelope
from api.payload_builders.bmp.interactive import (
    build_button_fields,
    build_list_fields,
    normalize_list_rows,
)
from api.payload_builders.bmp.media import (
    build_media_form_fields,
    build_media_url_fields,
    build_product_fields,
    build_text_fields,
)

__all__ = [
    "build_button_fields",
    "build_envelope",
    "build_list_fields",
    "build_media_form_fields",
    "build_media_url_fields",
    "build_product_fields",
    "build_text_fields",
    "normalize_list_rows",
    "with_envelope",
]
