"""
Checkout service.

Starts a hosted checkout for a photo and resolves a completed checkout
back to the purchased photo key.

Dependencies: lastnightpix.boundary.payments, lastnightpix.configs
System role: Purchase orchestration
"""

import logging
import math
from typing import Any

from fastapi.concurrency import run_in_threadpool

from lastnightpix.boundary.payments import StripeCheckoutClient
from lastnightpix.configs.payments import StripeSettings
from lastnightpix.core.exceptions import MissingPurchaseKeyError, PaymentRequiredError
from lastnightpix.core.keys import filename_from_key

logger = logging.getLogger(__name__)


def resolve_amount(price_cents: Any, default: int) -> int:
    """
    Use the requested price only when it is a finite number.

    Booleans, strings, None, NaN and infinities fall back to the default.
    """
    if isinstance(price_cents, bool) or not isinstance(price_cents, (int, float)):
        return default
    if not math.isfinite(price_cents):
        return default
    return int(price_cents)


class CheckoutService:
    """Sell full-resolution photos through hosted checkout."""

    def __init__(self, payments: StripeCheckoutClient, settings: StripeSettings | None = None) -> None:
        self.payments = payments
        self.settings = settings or StripeSettings()

    async def create_session(self, key: str, price_cents: Any = None) -> str:
        """
        Create a checkout session for one photo.

        Args:
            key: Photo key being purchased
            price_cents: Requested price; non-numeric values use the default price

        Returns:
            str: Hosted checkout URL

        Raises:
            PaymentNotConfiguredError: If Stripe is not configured
            PaymentError: If Stripe rejects the request
        """
        amount = resolve_amount(price_cents, self.settings.default_price_cents)
        session = await run_in_threadpool(
            self.payments.create_photo_checkout,
            key=key,
            amount_cents=amount,
            currency=self.settings.checkout_currency,
            product_name=self.settings.product_name,
            description=filename_from_key(key),
            success_url=self.settings.success_url,
            cancel_url=self.settings.cancel_url,
        )
        return session.url or ""

    async def resolve_paid_key(self, session_id: str) -> str:
        """
        Return the photo key purchased by a paid checkout session.

        Raises:
            PaymentRequiredError: If the session is not paid
            MissingPurchaseKeyError: If the session carries no photo key
            PaymentError: If Stripe rejects the request
        """
        session = await run_in_threadpool(self.payments.retrieve_session, session_id)
        if not session.is_paid:
            logger.warning(
                "Download attempted for unpaid session",
                extra={"checkout_session_id": session_id, "payment_status": session.payment_status},
            )
            raise PaymentRequiredError(session_id, session.payment_status)

        key = session.metadata.get("s3_key")
        if not key:
            raise MissingPurchaseKeyError(session_id)
        return key
