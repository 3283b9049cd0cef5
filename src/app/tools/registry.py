"""Registro de tools: nome → modelo de entrada + operação da fachada.

Uso:
    from app.tools import invoke_tool

    result = await invoke_tool(service, "send_text", {"to": "628...", "text": "oi"})
    # {"content": [{"type": "text", "text": "{\"status\": \"ok\", ...}"}]}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.validators.bmp import validate_payload
from app.tools.definitions import (
    SendButtonInput,
    SendFileInput,
    SendImageInput,
    SendImageUrlListInput,
    SendListInput,
    SendProductInput,
    SendTextInput,
    ToolInput,
    row_to_dict,
)
from utils.masking import mask_recipient

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from app.use_cases.messaging import MessagingService

logger = logging.getLogger(__name__)


class UnknownToolError(LookupError):
    """Tool não registrada."""


@dataclass(frozen=True)
class ToolSpec:
    """Definição de uma tool exposta ao protocolo."""

    name: str
    description: str
    input_model: type[ToolInput]
    handler: Callable[[MessagingService, Any], Awaitable[Any]]

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_model.model_json_schema(by_alias=True),
        }


async def _send_text(service: MessagingService, args: SendTextInput) -> Any:
    return await service.send_text(args.to, args.text)


async def _send_list(service: MessagingService, args: SendListInput) -> Any:
    return await service.send_list(
        args.to,
        args.text,
        args.list_title,
        [row_to_dict(row) for row in args.list_data],
    )


async def _send_button(service: MessagingService, args: SendButtonInput) -> Any:
    return await service.send_button(
        args.to,
        args.text,
        args.buttons,
        header_type=args.header_type,
        header=args.header,
        footer=args.footer,
    )


async def _send_image(service: MessagingService, args: SendImageInput) -> Any:
    return await service.send_image(args.to, args.media_url, args.text)


async def _send_image_url_list(
    service: MessagingService, args: SendImageUrlListInput
) -> Any:
    return await service.send_image_url_list(args.to, args.media_urls)


async def _send_image_file(service: MessagingService, args: SendFileInput) -> Any:
    return await service.send_image_file(args.to, args.file_path, args.text)


async def _send_video_file(service: MessagingService, args: SendFileInput) -> Any:
    return await service.send_video_file(args.to, args.file_path, args.text)


async def _send_audio_file(service: MessagingService, args: SendFileInput) -> Any:
    return await service.send_audio_file(args.to, args.file_path, args.text)


async def _send_document_file(service: MessagingService, args: SendFileInput) -> Any:
    return await service.send_document_file(args.to, args.file_path, args.text)


async def _send_product(service: MessagingService, args: SendProductInput) -> Any:
    return await service.send_product(
        args.to,
        args.catalog_id,
        args.product_id,
        text=args.text,
        footer=args.footer,
    )


TOOLS: dict[str, ToolSpec] = {
    tool.name: tool
    for tool in (
        ToolSpec("send_text", "Send a plain text message", SendTextInput, _send_text),
        ToolSpec("send_list", "Send an interactive list (1-10 rows)", SendListInput, _send_list),
        ToolSpec(
            "send_button",
            "Send a message with 1-3 quick reply buttons",
            SendButtonInput,
            _send_button,
        ),
        ToolSpec("send_image", "Send an image by public URL", SendImageInput, _send_image),
        ToolSpec(
            "send_image_url",
            "Send an image by public URL (alias of send_image)",
            SendImageInput,
            _send_image,
        ),
        ToolSpec(
            "send_image_url_list",
            "Send several images by URL, one message each, in order",
            SendImageUrlListInput,
            _send_image_url_list,
        ),
        ToolSpec(
            "send_image_file", "Upload and send a local image file", SendFileInput, _send_image_file
        ),
        ToolSpec(
            "send_video_file", "Upload and send a local video file", SendFileInput, _send_video_file
        ),
        ToolSpec(
            "send_audio_file", "Upload and send a local audio file", SendFileInput, _send_audio_file
        ),
        ToolSpec(
            "send_document_file",
            "Upload and send a local document (PDF/DOC/etc.)",
            SendFileInput,
            _send_document_file,
        ),
        ToolSpec(
            "send_product", "Send a catalog product message", SendProductInput, _send_product
        ),
    )
}


def list_tools() -> list[dict[str, Any]]:
    """Descrição de todas as tools com JSON schema de entrada."""
    return [tool.describe() for tool in TOOLS.values()]


def _completion_fields(result: Any) -> dict[str, Any]:
    if isinstance(result, list):
        return {"sent": len(result)}
    if isinstance(result, dict):
        return {"status": result.get("status"), "message_id": result.get("messageId")}
    return {}


async def invoke_tool(
    service: MessagingService,
    name: str,
    arguments: Mapping[str, Any],
) -> dict[str, Any]:
    """Valida argumentos, executa a tool e serializa o resultado.

    Raises:
        UnknownToolError: Se `name` não está registrada.
        ValidationError: Argumentos ou payload inválidos.
        TerminalHttpError / NetworkError / MediaFileError: Falha de envio.
    """
    tool = TOOLS.get(name)
    if tool is None:
        raise UnknownToolError(name)

    args = validate_payload(tool.input_model, arguments)
    logger.info("tool_invoked", extra={"tool": name, "to": mask_recipient(args.to)})

    result = await tool.handler(service, args)

    logger.info(
        "tool_completed",
        extra={"tool": name, "to": mask_recipient(args.to), **_completion_fields(result)},
    )
    return {"content": [{"type": "text", "text": json.dumps(result)}]}
