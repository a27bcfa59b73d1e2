"""
Exception hierarchy for the LastNightPix photo API.

Provides layered exception structure for domain-specific errors.
Boundary adapters translate SDK errors into these; routers translate
these into HTTP responses.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class LastNightPixException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the bare message; details are for logs."""
        return self.message


class StorageError(LastNightPixException):
    """Raised when an object storage operation fails."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            key: Object key involved
            operation: Operation that failed (put, get, head)
            details: Additional context
        """
        details = details or {}
        if key:
            details["key"] = key
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class PhotoNotFoundError(StorageError):
    """Raised when a photo key does not exist in the bucket."""

    def __init__(self, key: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Photo not found: {key}", key=key, operation="get", details=details)


class FaceRecognitionError(LastNightPixException):
    """Raised when face indexing or searching fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class ImageProcessingError(LastNightPixException):
    """Raised when an image cannot be decoded or encoded."""

    pass


class PaymentError(LastNightPixException):
    """Raised when the payment provider call fails."""

    pass


class PaymentNotConfiguredError(PaymentError):
    """Raised when a payment call is made without a configured secret."""

    def __init__(self) -> None:
        super().__init__("Stripe not configured: missing STRIPE_SECRET env var")


class PaymentRequiredError(PaymentError):
    """Raised when a checkout session is not paid."""

    def __init__(self, session_id: str, payment_status: str | None = None) -> None:
        super().__init__(
            "Payment required or not verified",
            {"session_id": session_id, "payment_status": payment_status},
        )


class MissingPurchaseKeyError(PaymentError):
    """Raised when a paid session carries no photo key in its metadata."""

    def __init__(self, session_id: str) -> None:
        super().__init__("Missing key in session metadata", {"session_id": session_id})
