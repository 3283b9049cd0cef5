"""Limites estruturais das mensagens BMP."""

from __future__ import annotations

from typing import Final

MAX_TEXT_LENGTH: Final[int] = 1024

# Lista interativa
MAX_LIST_TITLE_LENGTH: Final[int] = 20
MIN_LIST_ROWS: Final[int] = 1
MAX_LIST_ROWS: Final[int] = 10
MAX_ROW_TITLE_LENGTH: Final[int] = 24
MAX_ROW_DESCRIPTION_LENGTH: Final[int] = 72

# Botões
MIN_BUTTONS: Final[int] = 1
MAX_BUTTONS: Final[int] = 3
MAX_BUTTON_LABEL_LENGTH: Final[int] = 20
MAX_HEADER_LENGTH: Final[int] = 2048
MAX_FOOTER_LENGTH: Final[int] = 60

# Destinatário (MSISDN) nas tools
MIN_RECIPIENT_LENGTH: Final[int] = 5
