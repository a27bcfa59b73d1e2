"""
Checkout models and schemas.

Request/response schemas for photo purchases and the checkout session
value object returned by the payment boundary.

Dependencies: pydantic
System role: Checkout API contracts
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CheckoutRequest(BaseModel):
    """Request schema for starting a photo purchase."""

    model_config = ConfigDict(populate_by_name=True)

    # Untyped: malformed values are rejected by the route, not by request validation.
    key: Any = Field(default=None, description="S3 key of the photo to buy")
    price_cents: Any = Field(default=None, alias="priceCents")

    @classmethod
    def from_body(cls, body: Any) -> "CheckoutRequest":
        """Read a JSON body, treating anything other than an object as empty."""
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)

    @property
    def photo_key(self) -> str | None:
        """The key when it is a non-empty string, otherwise None."""
        if isinstance(self.key, str) and self.key:
            return self.key
        return None


class CheckoutResponse(BaseModel):
    """Hosted checkout URL to redirect the buyer to."""

    url: str


class CheckoutErrorResponse(BaseModel):
    error: str


class CheckoutSession(BaseModel):
    """Subset of a Stripe Checkout Session used by the download flow."""

    id: str
    url: str | None = None
    payment_status: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)

    @property
    def is_paid(self) -> bool:
        return self.payment_status == "paid"
