"""
Stripe Checkout client.

Creates hosted checkout sessions for single photo purchases and retrieves
them to verify payment before a download is released.

The secret key is checked per call rather than at construction so the API
boots (and serves previews) without payment configuration.

Dependencies: stripe
System role: Payment boundary
"""

import logging
from typing import Any

import stripe

from lastnightpix.core.exceptions import PaymentError, PaymentNotConfiguredError
from lastnightpix.models.checkout import CheckoutSession

logger = logging.getLogger(__name__)


def _as_dict(obj: Any) -> dict:
    if obj is None:
        return {}
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return dict(obj)


class StripeCheckoutClient:
    """Thin wrapper over ``stripe.checkout.Session``."""

    def __init__(self, secret_key: str | None, api_version: str = "2024-06-20") -> None:
        """
        Args:
            secret_key: Stripe secret key, or None when payments are not configured
            api_version: Pinned Stripe API version sent with every request
        """
        self._secret_key = secret_key
        self._api_version = api_version

    @property
    def configured(self) -> bool:
        return bool(self._secret_key)

    def _request_options(self) -> dict[str, str]:
        if not self._secret_key:
            raise PaymentNotConfiguredError()
        return {"api_key": self._secret_key, "stripe_version": self._api_version}

    @staticmethod
    def _to_session(session: Any) -> CheckoutSession:
        return CheckoutSession(
            id=session.id,
            url=getattr(session, "url", None),
            payment_status=getattr(session, "payment_status", None),
            metadata={k: str(v) for k, v in _as_dict(getattr(session, "metadata", None)).items()},
        )

    def create_photo_checkout(
        self,
        key: str,
        amount_cents: int,
        currency: str,
        product_name: str,
        description: str,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """
        Create a one-item card checkout for a photo.

        Args:
            key: Photo key, stored in session metadata as ``s3_key``
            amount_cents: Unit amount in the currency's minor unit
            currency: ISO currency code
            product_name: Line item name
            description: Line item description
            success_url: Redirect after payment (may contain {CHECKOUT_SESSION_ID})
            cancel_url: Redirect on cancel

        Returns:
            CheckoutSession: Created session with its hosted URL

        Raises:
            PaymentNotConfiguredError: If no secret key is configured
            PaymentError: If Stripe rejects the request
        """
        options = self._request_options()
        try:
            session = stripe.checkout.Session.create(
                mode="payment",
                payment_method_types=["card"],
                line_items=[
                    {
                        "price_data": {
                            "currency": currency,
                            "product_data": {"name": product_name, "description": description},
                            "unit_amount": amount_cents,
                        },
                        "quantity": 1,
                    }
                ],
                metadata={"s3_key": key},
                success_url=success_url,
                cancel_url=cancel_url,
                **options,
            )
        except stripe.StripeError as e:
            raise PaymentError(
                getattr(e, "user_message", None) or str(e),
                {"s3_key": key, "stripe_code": getattr(e, "code", None)},
            ) from e

        logger.info(
            "Checkout session created",
            extra={"checkout_session_id": session.id, "s3_key": key, "amount_cents": amount_cents},
        )
        return self._to_session(session)

    def retrieve_session(self, session_id: str) -> CheckoutSession:
        """
        Retrieve a checkout session by id.

        Raises:
            PaymentNotConfiguredError: If no secret key is configured
            PaymentError: If Stripe rejects the request
        """
        options = self._request_options()
        try:
            session = stripe.checkout.Session.retrieve(session_id, **options)
        except stripe.StripeError as e:
            raise PaymentError(
                getattr(e, "user_message", None) or str(e),
                {"checkout_session_id": session_id, "stripe_code": getattr(e, "code", None)},
            ) from e
        return self._to_session(session)
