"""
Test suite for the dependency injection container.

System role: Verification of service wiring and client caching
"""

from unittest.mock import patch

import pytest

from lastnightpix.api.deps import dependencies
from lastnightpix.api.deps.dependencies import (
    ServiceCache,
    get_checkout_service,
    get_image_service,
    get_match_service,
    get_photo_service,
)
from lastnightpix.application.services import CheckoutService, ImageService, MatchService, PhotoService
from lastnightpix.configs import Settings
from lastnightpix.configs.aws import AWSSettings
from lastnightpix.configs.matching import MatchSettings
from lastnightpix.configs.payments import StripeSettings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        aws=AWSSettings(bucket_name="test-bucket", collection_id="test-collection", aws_region="eu-west-1"),
        matching=MatchSettings(single_threshold=90),
        stripe=StripeSettings(stripe_secret=None),
    )


@pytest.fixture
def cache(settings):
    fresh = ServiceCache()
    with patch.object(dependencies, "get_settings", return_value=settings), patch(
        "lastnightpix.boundary.aws.session.boto3.client"
    ) as boto_client, patch.object(dependencies, "_service_cache", fresh):
        fresh.boto_client = boto_client
        yield fresh


class TestServiceCache:
    def test_clients_are_built_once(self, cache) -> None:
        assert cache.s3_client is cache.s3_client
        assert cache.face_client is cache.face_client
        assert cache.s3_client.bucket == "test-bucket"

        services = [c.args[0] for c in cache.boto_client.call_args_list]
        assert services == ["s3", "rekognition"]

    def test_payment_client_without_secret(self, cache) -> None:
        assert cache.payment_client.configured is False

    def test_clear_drops_instances(self, cache) -> None:
        first = cache.renderer
        cache.clear()

        assert cache.renderer is not first


class TestServiceFactories:
    def test_photo_service(self, cache) -> None:
        service = get_photo_service()

        assert isinstance(service, PhotoService)
        assert service.storage is cache.s3_client
        assert service.faces is cache.face_client

    def test_match_service_uses_match_settings(self, cache, settings) -> None:
        service = get_match_service(settings)

        assert isinstance(service, MatchService)
        assert service.settings.single_threshold == 90

    def test_image_service(self, cache) -> None:
        service = get_image_service()

        assert isinstance(service, ImageService)
        assert service.renderer is cache.renderer

    def test_checkout_service(self, cache, settings) -> None:
        service = get_checkout_service(settings)

        assert isinstance(service, CheckoutService)
        assert service.payments is cache.payment_client
        assert service.settings is settings.stripe
