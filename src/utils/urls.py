"""Helpers de URL."""

from __future__ import annotations

import httpx


def is_http_url(value: str) -> bool:
    """True se `value` é URL absoluta http(s) com host."""
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError):
        return False
    return url.scheme in ("http", "https") and bool(url.host)
