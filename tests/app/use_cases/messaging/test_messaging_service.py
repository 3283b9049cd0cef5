"""Testes da fachada de envio (MessagingService)."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

import pytest

from app.bootstrap import create_messaging_service
from app.use_cases.messaging import MessagingService
from config.settings import BmpSettings
from tests.fakes.fake_bmp_transport import RecordingTransport, SleepRecorder
from utils.errors import MediaFileError, TerminalHttpError, ValidationError

TO = "628116823073"
OK_BODY = {"status": "ok", "messageId": "wamid.123"}


def _service(
    settings: BmpSettings,
    recorder: RecordingTransport,
    sleep: SleepRecorder | None = None,
) -> MessagingService:
    return create_messaging_service(
        settings, transport=recorder.transport, sleep=sleep or SleepRecorder()
    )


class _DeleteFileOnSleep(SleepRecorder):
    """Remove o arquivo durante o backoff, entre tentativas."""

    def __init__(self, path: Path) -> None:
        super().__init__()
        self._path = path

    async def __call__(self, delay: float) -> None:
        await super().__call__(delay)
        self._path.unlink(missing_ok=True)


class TestJsonOperations:
    """Envios JSON: envelope, validação e corpo devolvido intacto."""

    @pytest.mark.asyncio
    async def test_send_text_returns_body_unchanged(self, bmp_settings: BmpSettings) -> None:
        body = {**OK_BODY, "extra": {"nested": [1, 2]}}
        recorder = RecordingTransport((200, body))

        result = await _service(bmp_settings, recorder).send_text(TO, "Olá!")

        assert result == body
        assert recorder.json_bodies() == [
            {
                "platform": "WA",
                "from": "6287854171391",
                "to": TO,
                "type": "text",
                "text": "Olá!",
            }
        ]

    @pytest.mark.asyncio
    async def test_channel_included_when_configured(self, bmp_settings: BmpSettings) -> None:
        recorder = RecordingTransport((200, OK_BODY))

        await _service(replace(bmp_settings, channel="ch-01"), recorder).send_text(TO, "x")

        assert recorder.json_bodies()[0]["channel"] == "ch-01"

    @pytest.mark.asyncio
    async def test_send_list_normalizes_string_rows(self, bmp_settings: BmpSettings) -> None:
        recorder = RecordingTransport((200, OK_BODY))

        await _service(bmp_settings, recorder).send_list(
            TO, "Escolha", "Serviços", ["Corte", {"title": "Barba", "description": "30 min"}]
        )

        body = recorder.json_bodies()[0]
        assert body["type"] == "list"
        assert body["listTitle"] == "Serviços"
        assert body["listData"] == [
            {"title": "Corte"},
            {"title": "Barba", "description": "30 min"},
        ]

    @pytest.mark.asyncio
    async def test_send_button_with_optional_fields(self, bmp_settings: BmpSettings) -> None:
        recorder = RecordingTransport((200, OK_BODY))

        await _service(bmp_settings, recorder).send_button(
            TO,
            "Confirma?",
            ["Sim", "Não"],
            header_type="image",
            header="https://cdn.example.com/h.png",
        )

        body = recorder.json_bodies()[0]
        assert body["buttons"] == ["Sim", "Não"]
        assert body["headerType"] == "image"
        assert "footer" not in body

    @pytest.mark.asyncio
    async def test_send_image_and_alias(self, bmp_settings: BmpSettings) -> None:
        recorder = RecordingTransport((200, OK_BODY))
        service = _service(bmp_settings, recorder)

        await service.send_image(TO, "https://cdn.example.com/a.png", "legenda")
        await service.send_image_url(TO, "https://cdn.example.com/b.png")

        first, second = recorder.json_bodies()
        assert first["mediaType"] == "image"
        assert first["mediaUrl"] == "https://cdn.example.com/a.png"
        assert first["text"] == "legenda"
        assert "text" not in second

    @pytest.mark.asyncio
    async def test_send_product(self, bmp_settings: BmpSettings) -> None:
        recorder = RecordingTransport((200, OK_BODY))

        await _service(bmp_settings, recorder).send_product(TO, "cat-1", "prod-9", footer="f")

        body = recorder.json_bodies()[0]
        assert body["type"] == "product"
        assert body["catalogId"] == "cat-1"
        assert body["productId"] == "prod-9"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.send_list(TO, "t", "L", []),
            lambda s: s.send_list(TO, "t", "L", [f"r{i}" for i in range(11)]),
            lambda s: s.send_button(TO, "t", ["Sim", "SIM"]),
            lambda s: s.send_button(TO, "t", ["a", "b", "c", "d"]),
            lambda s: s.send_image(TO, "not-a-url"),
            lambda s: s.send_text(TO, ""),
        ],
    )
    async def test_invalid_payload_makes_no_network_call(
        self, bmp_settings: BmpSettings, call: Any
    ) -> None:
        recorder = RecordingTransport((200, OK_BODY))

        with pytest.raises(ValidationError):
            await call(_service(bmp_settings, recorder))

        assert recorder.calls == 0


class TestImageUrlList:
    """Envio sequencial com parada na primeira falha."""

    @pytest.mark.asyncio
    async def test_all_urls_sent_in_order(self, bmp_settings: BmpSettings) -> None:
        recorder = RecordingTransport((200, OK_BODY))
        urls = [f"https://cdn.example.com/{i}.png" for i in range(3)]

        results = await _service(bmp_settings, recorder).send_image_url_list(TO, urls)

        assert results == [OK_BODY] * 3
        assert [body["mediaUrl"] for body in recorder.json_bodies()] == urls

    @pytest.mark.asyncio
    async def test_stops_at_first_terminal_failure(self, bmp_settings: BmpSettings) -> None:
        recorder = RecordingTransport((200, OK_BODY), (404, {"error": "gone"}), (200, OK_BODY))
        urls = [f"https://cdn.example.com/{i}.png" for i in range(3)]

        with pytest.raises(TerminalHttpError) as exc_info:
            await _service(bmp_settings, recorder).send_image_url_list(TO, urls)

        assert exc_info.value.status_code == 404
        assert recorder.calls == 2

    @pytest.mark.asyncio
    async def test_invalid_url_stops_before_request(self, bmp_settings: BmpSettings) -> None:
        recorder = RecordingTransport((200, OK_BODY))
        urls = ["https://cdn.example.com/0.png", "nope", "https://cdn.example.com/2.png"]

        with pytest.raises(ValidationError):
            await _service(bmp_settings, recorder).send_image_url_list(TO, urls)

        assert recorder.calls == 1


class TestFileOperations:
    """Envio multipart de arquivos locais."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "media_type", "filename"),
        [
            ("send_image_file", "image", "photo.png"),
            ("send_video_file", "video", "clip.mp4"),
            ("send_audio_file", "audio", "voice.mp3"),
            ("send_document_file", "document", "report.pdf"),
        ],
    )
    async def test_file_sent_as_multipart(
        self,
        bmp_settings: BmpSettings,
        tmp_path: Path,
        method: str,
        media_type: str,
        filename: str,
    ) -> None:
        file_path = tmp_path / filename
        file_path.write_bytes(b"file-content-123")
        recorder = RecordingTransport((200, OK_BODY))
        service = _service(bmp_settings, recorder)

        result = await getattr(service, method)(TO, str(file_path), "legenda")

        request = recorder.requests[0]
        assert result == OK_BODY
        assert str(request.url).endswith("/message/media")
        assert b"file-content-123" in request.content
        assert f'filename="{filename}"'.encode() in request.content
        assert media_type.encode() in request.content
        assert b"legenda" in request.content

    @pytest.mark.asyncio
    async def test_retry_resends_bytes_read_once(
        self, bmp_settings: BmpSettings, tmp_path: Path
    ) -> None:
        file_path = tmp_path / "photo.png"
        file_path.write_bytes(b"original-bytes")
        recorder = RecordingTransport((503, {}), (200, OK_BODY))
        sleep = _DeleteFileOnSleep(file_path)

        result = await _service(bmp_settings, recorder, sleep).send_image_file(
            TO, str(file_path)
        )

        assert result == OK_BODY
        assert not file_path.exists()
        assert recorder.calls == 2
        assert all(b"original-bytes" in request.content for request in recorder.requests)

    @pytest.mark.asyncio
    async def test_missing_file_fails_before_any_request(
        self, bmp_settings: BmpSettings, tmp_path: Path
    ) -> None:
        recorder = RecordingTransport((200, OK_BODY))

        with pytest.raises(MediaFileError) as exc_info:
            await _service(bmp_settings, recorder).send_document_file(
                TO, str(tmp_path / "missing.pdf")
            )

        assert exc_info.value.file_path.endswith("missing.pdf")
        assert recorder.calls == 0


class TestSendRaw:
    """Payload arbitrário validado contra todas as variantes."""

    @pytest.mark.asyncio
    async def test_booking_template(self, bmp_settings: BmpSettings) -> None:
        recorder = RecordingTransport((200, OK_BODY))

        await _service(bmp_settings, recorder).send_raw(
            TO,
            {
                "type": "template",
                "templateLang": "en",
                "templateName": "cnc_booking_data",
                "headerType": "text",
            },
        )

        body = recorder.json_bodies()[0]
        assert body["templateName"] == "cnc_booking_data"
        assert body["from"] == "6287854171391"

    @pytest.mark.asyncio
    async def test_unknown_variant_rejected_without_request(
        self, bmp_settings: BmpSettings
    ) -> None:
        recorder = RecordingTransport((200, OK_BODY))

        with pytest.raises(ValidationError):
            await _service(bmp_settings, recorder).send_raw(TO, {"type": "sticker"})

        assert recorder.calls == 0
