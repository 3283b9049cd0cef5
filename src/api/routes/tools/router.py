"""Endpoints HTTP das tools de envio.

- GET  /tools         → lista de tools com JSON schema
- POST /tools/{name}  → executa a tool com os argumentos do body
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from app.tools import UnknownToolError, invoke_tool, list_tools
from utils.errors import MediaFileError, NetworkError, TerminalHttpError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def get_tools() -> dict[str, Any]:
    return {"tools": list_tools()}


@router.post("/{name}")
async def call_tool(
    name: str,
    request: Request,
    arguments: dict[str, Any] | None = Body(default=None),
) -> JSONResponse:
    """Executa tool e mapeia a taxonomia de erros para status HTTP."""
    service = request.app.state.messaging_service
    try:
        result = await invoke_tool(service, name, arguments or {})
    except UnknownToolError:
        return _error_response(404, "unknown_tool", f"Tool not found: {name}")
    except ValidationError as exc:
        return _error_response(422, "validation_error", str(exc), violations=exc.violations)
    except MediaFileError as exc:
        return _error_response(400, "media_file_error", str(exc))
    except TerminalHttpError as exc:
        logger.warning(
            "tool_failed",
            extra={"tool": name, "status_code": exc.status_code, "attempts": exc.attempts},
        )
        return _error_response(
            502,
            "upstream_error",
            str(exc),
            upstream_status=exc.status_code,
            upstream_body=exc.body,
        )
    except NetworkError as exc:
        logger.warning("tool_failed", extra={"tool": name, "attempts": exc.attempts})
        return _error_response(504, "network_error", str(exc))
    return JSONResponse(content=result)


def _error_response(status_code: int, code: str, message: str, **details: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"isError": True, "error": {"code": code, "message": message, **details}},
    )
