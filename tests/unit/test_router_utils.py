"""
Test suite for router helper utilities.

System role: Verification of upload reading and body streaming
"""

import io
from unittest.mock import MagicMock

import pytest
from fastapi import UploadFile

from lastnightpix.api.routers.router_utils import (
    UploadTooLargeError,
    attachment_disposition,
    iter_object_body,
    read_image_upload,
)


def _upload(content: bytes) -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename="a.jpg")


class TestReadImageUpload:
    @pytest.mark.asyncio
    async def test_reads_content_within_limit(self) -> None:
        assert await read_image_upload(_upload(b"x" * 10), max_bytes=10) == b"x" * 10

    @pytest.mark.asyncio
    async def test_rejects_content_over_limit(self) -> None:
        with pytest.raises(UploadTooLargeError, match="Maximum size: 10MB"):
            await read_image_upload(_upload(b"x" * (10 * 1024 * 1024 + 1)), max_bytes=10 * 1024 * 1024)

    @pytest.mark.asyncio
    async def test_closes_upload(self) -> None:
        upload = _upload(b"abc")

        await read_image_upload(upload, max_bytes=10)

        assert upload.file.closed


class TestIterObjectBody:
    def test_yields_chunks_and_closes(self, streaming_body) -> None:
        body = streaming_body(b"abc")

        assert b"".join(iter_object_body(body, "k.jpg", chunk_size=2)) == b"abc"
        body.iter_chunks.assert_called_once_with(chunk_size=2)
        body.close.assert_called_once()

    def test_mid_stream_error_is_reraised_and_body_closed(self) -> None:
        def broken(chunk_size):
            yield b"a"
            raise ConnectionError("reset")

        body = MagicMock()
        body.iter_chunks.side_effect = broken

        with pytest.raises(ConnectionError):
            list(iter_object_body(body, "k.jpg"))
        body.close.assert_called_once()


class TestAttachmentDisposition:
    def test_ascii_name_is_used_as_is(self) -> None:
        assert attachment_disposition("1-a.jpg") == 'attachment; filename="1-a.jpg"'

    def test_name_with_quotes_and_spaces_gets_fallback(self) -> None:
        assert attachment_disposition('my "best" shot.jpg') == (
            "attachment; filename=\"my_best_shot.jpg\"; filename*=UTF-8''my%20%22best%22%20shot.jpg"
        )

    def test_non_latin1_name_is_header_safe(self) -> None:
        value = attachment_disposition("café 漢.jpg")

        value.encode("latin-1")
        assert value.endswith("filename*=UTF-8''caf%C3%A9%20%E6%BC%A2.jpg")
