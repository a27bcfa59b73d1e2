"""API contracts and domain value objects."""

from lastnightpix.models.checkout import (
    CheckoutErrorResponse,
    CheckoutRequest,
    CheckoutResponse,
    CheckoutSession,
)
from lastnightpix.models.common import HealthResponse
from lastnightpix.models.matching import FaceMatch, GalleryItem, GalleryResponse, MatchResponse
from lastnightpix.models.photo import IndexResult, StoredObject, UploadErrorResponse, UploadResponse

__all__ = [
    "CheckoutErrorResponse",
    "CheckoutRequest",
    "CheckoutResponse",
    "CheckoutSession",
    "FaceMatch",
    "GalleryItem",
    "GalleryResponse",
    "HealthResponse",
    "IndexResult",
    "MatchResponse",
    "StoredObject",
    "UploadErrorResponse",
    "UploadResponse",
]
