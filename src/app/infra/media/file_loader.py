"""Carregamento de arquivos de mídia locais para envio multipart."""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from pathlib import Path

from api.connectors.bmp.http_base import MediaFile
from utils.errors import MediaFileError

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


async def load_media_file(file_path: str) -> MediaFile:
    """Lê o arquivo inteiro para memória uma única vez.

    A leitura roda em thread para não bloquear o event loop; nenhum
    descritor fica aberto depois do retorno.

    Raises:
        MediaFileError: Se o arquivo não existe ou não pode ser lido.
    """
    path = Path(file_path)
    try:
        content = await asyncio.to_thread(path.read_bytes)
    except OSError as exc:
        logger.warning(
            "media_file_unreadable",
            extra={"file_name": path.name, "error_type": type(exc).__name__},
        )
        raise MediaFileError(file_path, exc.strerror or type(exc).__name__) from exc

    content_type, _ = mimetypes.guess_type(path.name)
    return MediaFile(
        filename=path.name,
        content=content,
        content_type=content_type or DEFAULT_CONTENT_TYPE,
    )
