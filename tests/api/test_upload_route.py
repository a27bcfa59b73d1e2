"""
Test suite for the upload endpoint.

System role: Verification of photographer upload HTTP contract
"""

import pytest

from lastnightpix.api.deps import get_photo_service, get_settings_dependency
from lastnightpix.configs import Settings
from lastnightpix.configs.images import UploadSettings
from lastnightpix.core.exceptions import FaceRecognitionError
from lastnightpix.models.photo import IndexResult


@pytest.fixture
def upload_client(app, client, mock_photo_service):
    app.dependency_overrides[get_photo_service] = lambda: mock_photo_service
    return client


def test_upload_success(upload_client, mock_photo_service, sample_jpeg):
    mock_photo_service.upload_and_index.return_value = IndexResult(
        s3_key="event-photos/gala/1700000000000-a.jpg",
        external_id="event-photos:gala:1700000000000-a.jpg",
        indexed_faces=2,
    )

    response = upload_client.post(
        "/upload?event=%20gala%20",
        files={"image": ("a.jpg", sample_jpeg, "image/jpeg")},
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "s3Key": "event-photos/gala/1700000000000-a.jpg",
        "externalId": "event-photos:gala:1700000000000-a.jpg",
        "indexedFaces": 2,
    }
    mock_photo_service.upload_and_index.assert_awaited_once_with(
        content=sample_jpeg,
        filename="a.jpg",
        content_type="image/jpeg",
        event="gala",
    )


def test_upload_without_file(upload_client, mock_photo_service):
    response = upload_client.post("/upload")

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": 'No file uploaded. Field must be "image".'}
    mock_photo_service.upload_and_index.assert_not_called()


def test_upload_with_wrong_field_name(upload_client, sample_jpeg):
    response = upload_client.post("/upload", files={"photo": ("a.jpg", sample_jpeg, "image/jpeg")})

    assert response.status_code == 400


def test_upload_too_large(app, upload_client, mock_photo_service):
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(
        upload=UploadSettings(max_bytes=1024 * 1024)
    )

    response = upload_client.post(
        "/upload",
        files={"image": ("big.jpg", b"\0" * (1024 * 1024 + 1), "image/jpeg")},
    )

    assert response.status_code == 413
    assert response.json() == {"success": False, "error": "File too large. Maximum size: 1MB"}
    mock_photo_service.upload_and_index.assert_not_called()


def test_upload_index_failure(upload_client, mock_photo_service, sample_jpeg):
    mock_photo_service.upload_and_index.side_effect = FaceRecognitionError("collection not found")

    response = upload_client.post("/upload", files={"image": ("a.jpg", sample_jpeg, "image/jpeg")})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Upload/index failed: collection not found"}
