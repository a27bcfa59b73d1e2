"""
Test suite for CheckoutService.

System role: Verification of purchase orchestration
"""

import math
from unittest.mock import MagicMock

import pytest

from lastnightpix.application.services.checkout_service import CheckoutService, resolve_amount
from lastnightpix.configs.payments import StripeSettings
from lastnightpix.core.exceptions import MissingPurchaseKeyError, PaymentError, PaymentRequiredError
from lastnightpix.models.checkout import CheckoutSession


@pytest.fixture
def stripe_settings() -> StripeSettings:
    return StripeSettings(stripe_secret="sk_test_123", frontend_base="https://lastnightpix.test")


@pytest.fixture
def mock_payments() -> MagicMock:
    payments = MagicMock()
    payments.create_photo_checkout.return_value = CheckoutSession(
        id="cs_test_1", url="https://checkout.stripe.com/c/pay/cs_test_1"
    )
    return payments


@pytest.fixture
def checkout_service(mock_payments, stripe_settings) -> CheckoutService:
    return CheckoutService(payments=mock_payments, settings=stripe_settings)


class TestResolveAmount:
    @pytest.mark.parametrize("price, expected", [(1200, 1200), (750.0, 750), (0, 0)])
    def test_numbers_are_used(self, price, expected) -> None:
        assert resolve_amount(price, 500) == expected

    @pytest.mark.parametrize("price", [None, "1200", True, math.nan, math.inf, [1200]])
    def test_non_numbers_fall_back(self, price) -> None:
        assert resolve_amount(price, 500) == 500


class TestCreateSession:
    @pytest.mark.asyncio
    async def test_create_session_uses_settings(self, checkout_service, mock_payments) -> None:
        url = await checkout_service.create_session("event-photos/gala/1-a.jpg")

        assert url == "https://checkout.stripe.com/c/pay/cs_test_1"
        mock_payments.create_photo_checkout.assert_called_once_with(
            key="event-photos/gala/1-a.jpg",
            amount_cents=500,
            currency="usd",
            product_name="HD Photo Download",
            description="1-a.jpg",
            success_url="https://lastnightpix.test/thanks.html?session_id={CHECKOUT_SESSION_ID}",
            cancel_url="https://lastnightpix.test/find-gallery.html",
        )

    @pytest.mark.asyncio
    async def test_requested_price_overrides_default(self, checkout_service, mock_payments) -> None:
        await checkout_service.create_session("k.jpg", 1500)

        assert mock_payments.create_photo_checkout.call_args.kwargs["amount_cents"] == 1500

    @pytest.mark.asyncio
    async def test_payment_errors_propagate(self, checkout_service, mock_payments) -> None:
        mock_payments.create_photo_checkout.side_effect = PaymentError("Invalid API Key provided")

        with pytest.raises(PaymentError, match="Invalid API Key"):
            await checkout_service.create_session("k.jpg")


class TestResolvePaidKey:
    @pytest.mark.asyncio
    async def test_paid_session_returns_key(self, checkout_service, mock_payments) -> None:
        mock_payments.retrieve_session.return_value = CheckoutSession(
            id="cs_test_1", payment_status="paid", metadata={"s3_key": "event-photos/gala/1-a.jpg"}
        )

        assert await checkout_service.resolve_paid_key("cs_test_1") == "event-photos/gala/1-a.jpg"
        mock_payments.retrieve_session.assert_called_once_with("cs_test_1")

    @pytest.mark.asyncio
    async def test_unpaid_session_raises(self, checkout_service, mock_payments) -> None:
        mock_payments.retrieve_session.return_value = CheckoutSession(
            id="cs_test_1", payment_status="unpaid", metadata={"s3_key": "k.jpg"}
        )

        with pytest.raises(PaymentRequiredError) as exc_info:
            await checkout_service.resolve_paid_key("cs_test_1")

        assert exc_info.value.details["payment_status"] == "unpaid"

    @pytest.mark.asyncio
    async def test_paid_session_without_key_raises(self, checkout_service, mock_payments) -> None:
        mock_payments.retrieve_session.return_value = CheckoutSession(id="cs_test_1", payment_status="paid")

        with pytest.raises(MissingPurchaseKeyError):
            await checkout_service.resolve_paid_key("cs_test_1")
