"""
Stripe Checkout configuration.

Secret key, API version, pricing defaults and the frontend redirect URLs.

Dependencies: pydantic_settings
System role: Payment configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StripeSettings(BaseSettings):
    """Settings for hosted checkout sessions."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    stripe_secret: str | None = Field(
        default=None,
        description="Stripe secret key; payment routes fail until it is set",
    )
    stripe_api_version: str = Field(default="2024-06-20", description="Pinned Stripe API version")
    frontend_base: str = Field(
        default="https://YOUR-SITE.netlify.app",
        description="Base URL of the static frontend used for checkout redirects",
    )
    checkout_currency: str = Field(default="usd", description="ISO currency for photo purchases")
    default_price_cents: int = Field(default=500, ge=0, description="Price used when none is supplied")
    product_name: str = Field(default="HD Photo Download", description="Checkout line item name")
    success_path: str = Field(default="/thanks.html", description="Frontend page after payment")
    cancel_path: str = Field(default="/find-gallery.html", description="Frontend page on cancel")

    @property
    def success_url(self) -> str:
        """Success URL with Stripe's session id placeholder."""
        return f"{self.frontend_base.rstrip('/')}{self.success_path}?session_id={{CHECKOUT_SESSION_ID}}"

    @property
    def cancel_url(self) -> str:
        """Cancel URL."""
        return f"{self.frontend_base.rstrip('/')}{self.cancel_path}"
