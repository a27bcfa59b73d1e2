"""
Shared test fixtures and configuration for entire test suite.

Provides: Sample images, service mocks, boundary client mocks, API client
Dependencies: pytest, Pillow, fastapi
System role: Test infrastructure and fixture management
"""

import io
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from lastnightpix.main import create_app


def make_jpeg(width: int = 640, height: int = 480, color=(40, 120, 200)) -> bytes:
    """Encode a solid-colour JPEG."""
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def sample_jpeg() -> bytes:
    """Small JPEG used as a photo or selfie upload."""
    return make_jpeg()


@pytest.fixture
def app():
    """Fresh application per test so dependency overrides never leak."""
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_photo_service():
    service = AsyncMock()
    service.upload_and_index = AsyncMock()
    return service


@pytest.fixture
def mock_match_service():
    service = AsyncMock()
    service.find_best = AsyncMock(return_value=None)
    service.find_gallery = AsyncMock(return_value=[])
    return service


@pytest.fixture
def mock_image_service():
    service = AsyncMock()
    service.preview = AsyncMock(return_value=b"\xff\xd8preview")
    service.open_original = AsyncMock()
    return service


@pytest.fixture
def mock_checkout_service():
    service = AsyncMock()
    service.create_session = AsyncMock(return_value="https://checkout.stripe.com/c/pay/cs_test_123")
    service.resolve_paid_key = AsyncMock()
    return service


@pytest.fixture
def mock_s3_client():
    """Mock S3PhotoClient with a fixed bucket name."""
    client = MagicMock()
    client.bucket = "test-bucket"
    return client


@pytest.fixture
def mock_face_client():
    """Mock FaceCollectionClient."""
    client = MagicMock()
    client.index_photo.return_value = ["face-1"]
    client.search_by_image.return_value = []
    return client


@pytest.fixture
def streaming_body():
    """Factory for mock botocore StreamingBody objects yielding content in one chunk."""

    def _make(content: bytes) -> MagicMock:
        body = MagicMock()
        body.iter_chunks.return_value = iter([content])
        body.read.return_value = content
        return body

    return _make


@pytest.fixture
def jpeg_factory():
    """Factory for solid-colour JPEGs of a given size."""
    return make_jpeg
