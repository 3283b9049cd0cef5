"""Agregador de settings do gateway BMP."""

from __future__ import annotations

from config.settings.bmp import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_REQUEST_TIMEOUT_MS,
    DEFAULT_RETRY_MAX_ATTEMPTS,
    BmpSettings,
    load_settings_or_fail,
)

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PORT",
    "DEFAULT_REQUEST_TIMEOUT_MS",
    "DEFAULT_RETRY_MAX_ATTEMPTS",
    "BmpSettings",
    "load_settings_or_fail",
]
