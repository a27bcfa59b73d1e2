"""Application services."""

from .checkout_service import CheckoutService
from .image_service import ImageService
from .match_service import MatchService
from .photo_service import PhotoService

__all__ = ["CheckoutService", "ImageService", "MatchService", "PhotoService"]
