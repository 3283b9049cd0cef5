"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_reports_service_name() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "bmp-gateway"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_messaging_service() -> None:
    request = _build_request_with_state(SimpleNamespace(messaging_service=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_service_is_wired() -> None:
    request = _build_request_with_state(SimpleNamespace(messaging_service=object()))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
