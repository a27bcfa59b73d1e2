"""
Dependency injection container.

Factory functions for FastAPI dependencies. Boundary clients are built
lazily on first use and shared across requests.

Dependencies: lastnightpix.configs, lastnightpix.application, lastnightpix.boundary
System role: DI container for service injection
"""

from fastapi import Depends

from lastnightpix.application.services import (
    CheckoutService,
    ImageService,
    MatchService,
    PhotoService,
)
from lastnightpix.boundary.aws import FaceCollectionClient, S3PhotoClient
from lastnightpix.boundary.payments import StripeCheckoutClient
from lastnightpix.configs import Settings, get_settings
from lastnightpix.core.watermark import WatermarkRenderer


class ServiceCache:
    """Container for cached boundary clients."""

    def __init__(self):
        self._s3_client = None
        self._face_client = None
        self._payment_client = None
        self._renderer = None

    @property
    def s3_client(self) -> S3PhotoClient:
        """Get cached S3 photo client."""
        if self._s3_client is None:
            aws = get_settings().aws
            self._s3_client = S3PhotoClient(
                bucket=aws.bucket_name,
                region=aws.aws_region,
                access_key_id=aws.aws_access_key_id,
                secret_access_key=aws.aws_secret_access_key,
            )
        return self._s3_client

    @property
    def face_client(self) -> FaceCollectionClient:
        """Get cached Rekognition collection client."""
        if self._face_client is None:
            aws = get_settings().aws
            self._face_client = FaceCollectionClient(
                collection_id=aws.collection_id,
                region=aws.aws_region,
                access_key_id=aws.aws_access_key_id,
                secret_access_key=aws.aws_secret_access_key,
            )
        return self._face_client

    @property
    def payment_client(self) -> StripeCheckoutClient:
        """Get cached Stripe client (constructed even when no secret is set)."""
        if self._payment_client is None:
            stripe_settings = get_settings().stripe
            self._payment_client = StripeCheckoutClient(
                secret_key=stripe_settings.stripe_secret,
                api_version=stripe_settings.stripe_api_version,
            )
        return self._payment_client

    @property
    def renderer(self) -> WatermarkRenderer:
        """Get cached preview renderer."""
        if self._renderer is None:
            preview = get_settings().preview
            self._renderer = WatermarkRenderer(
                text=preview.watermark_text,
                font_size=preview.font_size,
                font_path=preview.font_path,
                quality=preview.quality,
                max_side=preview.max_side,
            )
        return self._renderer

    def clear(self) -> None:
        """Clear all cached instances."""
        self._s3_client = None
        self._face_client = None
        self._payment_client = None
        self._renderer = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_photo_service() -> PhotoService:
    """
    Get photo upload service.

    Returns:
        PhotoService: Service wired to the shared S3 and Rekognition clients
    """
    cache = get_service_cache()
    return PhotoService(storage=cache.s3_client, faces=cache.face_client)


def get_match_service(settings: Settings = Depends(get_settings_dependency)) -> MatchService:
    """
    Get selfie matching service.

    Args:
        settings: Application settings (injected via Depends)

    Returns:
        MatchService: Service using the configured thresholds
    """
    return MatchService(faces=get_service_cache().face_client, settings=settings.matching)


def get_image_service() -> ImageService:
    """Get preview/original image service."""
    cache = get_service_cache()
    return ImageService(storage=cache.s3_client, renderer=cache.renderer)


def get_checkout_service(settings: Settings = Depends(get_settings_dependency)) -> CheckoutService:
    """
    Get checkout service.

    Args:
        settings: Application settings (injected via Depends)

    Returns:
        CheckoutService: Service using the configured prices and redirect URLs
    """
    return CheckoutService(payments=get_service_cache().payment_client, settings=settings.stripe)
