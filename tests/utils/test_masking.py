"""Testes de mascaramento de dados sensíveis e helpers de URL."""

from __future__ import annotations

import pytest

from utils.masking import bearer_header, mask_recipient, normalize_access_token
from utils.urls import is_http_url


class TestMaskRecipient:
    def test_keeps_last_four_digits(self) -> None:
        assert mask_recipient("628116823073") == "********3073"

    @pytest.mark.parametrize("value", ["1", "123", "1234"])
    def test_short_values_fully_masked(self, value: str) -> None:
        assert mask_recipient(value) == "****"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_passthrough(self, value: str | None) -> None:
        assert mask_recipient(value) == value


class TestBearerHeader:
    @pytest.mark.parametrize(
        "token",
        ["abc123", "Bearer abc123", "BEARER abc123", "  Bearer   abc123  "],
    )
    def test_exactly_one_prefix(self, token: str) -> None:
        assert bearer_header(token) == "Bearer abc123"

    def test_normalize_only_strips_leading_prefix(self) -> None:
        assert normalize_access_token("tokenBearer x") == "tokenBearer x"


class TestIsHttpUrl:
    @pytest.mark.parametrize(
        "value",
        ["https://cdn.example.com/a.png", "http://localhost:8080/x"],
    )
    def test_accepts_http_urls(self, value: str) -> None:
        assert is_http_url(value) is True

    @pytest.mark.parametrize(
        "value",
        ["not-a-url", "ftp://example.com/a.png", "/relative/path.png", "https://", ""],
    )
    def test_rejects_other_values(self, value: str) -> None:
        assert is_http_url(value) is False
