"""
Test suite for PhotoService.

Boundary clients are MagicMocks; the service runs them in the threadpool.

System role: Verification of upload and indexing orchestration
"""

import re

import pytest

from lastnightpix.application.services.photo_service import PhotoService
from lastnightpix.core.exceptions import FaceRecognitionError, StorageError


@pytest.fixture
def photo_service(mock_s3_client, mock_face_client) -> PhotoService:
    return PhotoService(storage=mock_s3_client, faces=mock_face_client)


class TestUploadAndIndex:
    @pytest.mark.asyncio
    async def test_stores_then_indexes_under_event_prefix(
        self, photo_service, mock_s3_client, mock_face_client, sample_jpeg
    ) -> None:
        mock_face_client.index_photo.return_value = ["f-1", "f-2", "f-3"]

        result = await photo_service.upload_and_index(sample_jpeg, "DSC 001.jpg", "image/jpeg", event="gala")

        assert re.fullmatch(r"event-photos/gala/\d+-DSC_001\.jpg", result.s3_key)
        assert result.external_id == result.s3_key.replace("/", ":")
        assert result.indexed_faces == 3
        mock_s3_client.put_photo.assert_called_once_with(result.s3_key, sample_jpeg, "image/jpeg")
        mock_face_client.index_photo.assert_called_once_with("test-bucket", result.s3_key, result.external_id)

    @pytest.mark.asyncio
    async def test_missing_event_uses_default_prefix(self, photo_service, sample_jpeg) -> None:
        result = await photo_service.upload_and_index(sample_jpeg, "a.jpg", "image/jpeg")

        assert result.s3_key.startswith("event-photos/default/")
        assert result.indexed_faces == 1

    @pytest.mark.asyncio
    async def test_photo_without_faces(self, photo_service, mock_face_client, sample_jpeg) -> None:
        mock_face_client.index_photo.return_value = []

        result = await photo_service.upload_and_index(sample_jpeg, "crowd.jpg", "image/jpeg", event="gala")

        assert result.indexed_faces == 0

    @pytest.mark.asyncio
    async def test_storage_failure_skips_indexing(
        self, photo_service, mock_s3_client, mock_face_client, sample_jpeg
    ) -> None:
        mock_s3_client.put_photo.side_effect = StorageError("denied", key="k", operation="put")

        with pytest.raises(StorageError):
            await photo_service.upload_and_index(sample_jpeg, "a.jpg", "image/jpeg")

        mock_face_client.index_photo.assert_not_called()

    @pytest.mark.asyncio
    async def test_index_failure_leaves_object_stored(
        self, photo_service, mock_s3_client, mock_face_client, sample_jpeg
    ) -> None:
        mock_face_client.index_photo.side_effect = FaceRecognitionError("no collection", operation="index_faces")

        with pytest.raises(FaceRecognitionError):
            await photo_service.upload_and_index(sample_jpeg, "a.jpg", "image/jpeg")

        mock_s3_client.put_photo.assert_called_once()
