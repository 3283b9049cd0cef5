"""Configuração do pytest para o gateway BMP."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import BmpSettings  # noqa: E402

BMP_ENV_VARS = (
    "BMP_API_BASE_URL",
    "BMP_ACCESS_TOKEN",
    "BMP_SENDER_MSISDN",
    "BMP_PLATFORM",
    "BMP_CHANNEL",
    "REQUEST_TIMEOUT_MS",
    "RETRY_MAX_ATTEMPTS",
    "LOG_LEVEL",
    "PORT",
)


@pytest.fixture
def bmp_settings() -> BmpSettings:
    return BmpSettings(
        api_base_url="https://bmp.test/api/v1",
        access_token="Bearer abc123",
        sender_msisdn="6287854171391",
        platform="WA",
        request_timeout_ms=1000,
        retry_max_attempts=3,
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove variáveis BMP do ambiente do processo de teste."""
    for name in BMP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
