"""API-specific dependencies."""

from .dependencies import (
    get_checkout_service,
    get_image_service,
    get_match_service,
    get_photo_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_checkout_service",
    "get_image_service",
    "get_match_service",
    "get_photo_service",
    "get_service_cache",
    "get_settings_dependency",
]
