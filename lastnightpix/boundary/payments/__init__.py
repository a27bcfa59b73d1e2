"""
Payment boundary modules.

Exports: StripeCheckoutClient
"""

from .stripe_client import StripeCheckoutClient

__all__ = ["StripeCheckoutClient"]
