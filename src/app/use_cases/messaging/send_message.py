"""Fachada de envio de mensagens BMP.

Cada operação: mescla envelope → normaliza → valida (sem rede em caso
de falha) → envia via transporte com retry → devolve o corpo parseado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.bmp import (
    build_button_fields,
    build_list_fields,
    build_media_form_fields,
    build_media_url_fields,
    build_product_fields,
    build_text_fields,
    with_envelope,
)
from api.validators.bmp import (
    ButtonPayload,
    ListPayload,
    MediaPayload,
    MediaUploadForm,
    ProductPayload,
    TextPayload,
    dump_payload,
    validate_any_payload,
    validate_payload,
)
from app.infra.media import load_media_file
from utils.masking import mask_recipient

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from api.connectors.bmp import BmpHttpClient
    from api.validators.bmp import EnvelopeModel, MediaType
    from config.settings import BmpSettings

logger = logging.getLogger(__name__)


class MessagingService:
    """Operações de envio, uma por tipo lógico de mensagem."""

    def __init__(self, settings: BmpSettings, client: BmpHttpClient) -> None:
        self._settings = settings
        self._client = client

    async def send_text(self, to: str, text: str) -> dict[str, Any]:
        return await self._send_json(TextPayload, to, build_text_fields(text))

    async def send_list(
        self,
        to: str,
        text: str,
        list_title: str,
        list_data: Iterable[str | Mapping[str, Any]],
    ) -> dict[str, Any]:
        """Envia lista interativa; linhas em string viram `{"title": ...}`."""
        return await self._send_json(
            ListPayload, to, build_list_fields(text, list_title, list_data)
        )

    async def send_button(
        self,
        to: str,
        text: str,
        buttons: Iterable[str],
        header_type: str | None = None,
        header: str | None = None,
        footer: str | None = None,
    ) -> dict[str, Any]:
        return await self._send_json(
            ButtonPayload,
            to,
            build_button_fields(text, buttons, header_type, header, footer),
        )

    async def send_image(
        self,
        to: str,
        media_url: str,
        text: str | None = None,
    ) -> dict[str, Any]:
        return await self._send_json(
            MediaPayload, to, build_media_url_fields("image", media_url, text)
        )

    send_image_url = send_image

    async def send_image_url_list(
        self,
        to: str,
        media_urls: Iterable[str],
    ) -> list[dict[str, Any]]:
        """Envia uma imagem por URL, em ordem, parando na primeira falha.

        Envios já concluídos não são desfeitos; o erro da URL que falhou
        propaga para o chamador.
        """
        results: list[dict[str, Any]] = []
        for media_url in media_urls:
            results.append(await self.send_image(to, media_url))
        logger.info(
            "image_url_list_sent",
            extra={"to": mask_recipient(to), "sent": len(results)},
        )
        return results

    async def send_image_file(
        self, to: str, file_path: str, text: str | None = None
    ) -> dict[str, Any]:
        return await self._send_file("image", to, file_path, text)

    async def send_video_file(
        self, to: str, file_path: str, text: str | None = None
    ) -> dict[str, Any]:
        return await self._send_file("video", to, file_path, text)

    async def send_audio_file(
        self, to: str, file_path: str, text: str | None = None
    ) -> dict[str, Any]:
        return await self._send_file("audio", to, file_path, text)

    async def send_document_file(
        self, to: str, file_path: str, text: str | None = None
    ) -> dict[str, Any]:
        return await self._send_file("document", to, file_path, text)

    async def send_product(
        self,
        to: str,
        catalog_id: str,
        product_id: str,
        text: str | None = None,
        footer: str | None = None,
    ) -> dict[str, Any]:
        return await self._send_json(
            ProductPayload,
            to,
            build_product_fields(catalog_id, product_id, text, footer),
        )

    async def send_raw(self, to: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Envia payload arbitrário validado contra todas as variantes (inclui templates)."""
        validated = validate_any_payload(with_envelope(self._settings, to, payload))
        response = await self._client.send_message(dump_payload(validated))
        return response.data

    async def _send_json(
        self,
        model: type[EnvelopeModel],
        to: str,
        fields: Mapping[str, Any],
    ) -> dict[str, Any]:
        payload = validate_payload(model, with_envelope(self._settings, to, fields))
        response = await self._client.send_message(dump_payload(payload))
        return response.data

    async def _send_file(
        self,
        media_type: MediaType,
        to: str,
        file_path: str,
        text: str | None,
    ) -> dict[str, Any]:
        form = validate_payload(
            MediaUploadForm,
            with_envelope(self._settings, to, build_media_form_fields(media_type, text)),
        )
        media_file = await load_media_file(file_path)
        response = await self._client.send_media(dump_payload(form), media_file)
        return response.data
