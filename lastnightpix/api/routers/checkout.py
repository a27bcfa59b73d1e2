"""
Checkout and download API endpoints.

Routes:
- POST /create-checkout-session - Start a hosted checkout for one photo
- GET /download?session_id= - Stream the purchased photo once the session is paid

Dependencies: lastnightpix.application.services, lastnightpix.models
System role: Purchase HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse, PlainTextResponse, StreamingResponse

from lastnightpix.api.deps import get_checkout_service, get_image_service
from lastnightpix.api.routers.router_utils import attachment_disposition, iter_object_body
from lastnightpix.application.services import CheckoutService, ImageService
from lastnightpix.core.exceptions import (
    MissingPurchaseKeyError,
    PaymentRequiredError,
    StorageError,
)
from lastnightpix.core.keys import filename_from_key
from lastnightpix.models.checkout import CheckoutErrorResponse, CheckoutRequest, CheckoutResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["checkout"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=CheckoutErrorResponse(error=message).model_dump())


@router.post(
    "/create-checkout-session",
    response_model=CheckoutResponse,
    responses={400: {"model": CheckoutErrorResponse}, 500: {"model": CheckoutErrorResponse}},
)
async def create_checkout_session(
    body: Any = Body(default=None),
    checkout_service: CheckoutService = Depends(get_checkout_service),
):
    """
    Create a hosted checkout session for a photo.

    Args:
        body: JSON object with the photo key and an optional price in cents
        checkout_service: Injected CheckoutService

    Returns:
        CheckoutResponse: URL of the hosted checkout page
    """
    payload = CheckoutRequest.from_body(body)
    key = payload.photo_key
    if key is None:
        return _error(400, "Missing key")

    try:
        url = await checkout_service.create_session(key, payload.price_cents)
    except Exception as e:
        logger.exception(
            "create-checkout-session failed",
            extra={"s3_key": key, "error": str(e)},
        )
        return _error(500, f"Failed to create checkout session: {e}")

    return CheckoutResponse(url=url)


@router.get("/download", response_class=StreamingResponse)
async def download_photo(
    session_id: str | None = Query(default=None),
    checkout_service: CheckoutService = Depends(get_checkout_service),
    image_service: ImageService = Depends(get_image_service),
):
    """
    Release the full-resolution photo bought in a checkout session.

    Args:
        session_id: Stripe Checkout Session id from the success redirect
        checkout_service: Injected CheckoutService
        image_service: Injected ImageService

    Returns:
        StreamingResponse: Photo as an attachment
    """
    if not session_id:
        return PlainTextResponse("Missing session_id", status_code=400)

    try:
        key = await checkout_service.resolve_paid_key(session_id)
        stored = await image_service.open_original(key)
        response = StreamingResponse(
            iter_object_body(stored.body, key),
            media_type="image/jpeg",
            headers={"Content-Disposition": attachment_disposition(filename_from_key(key))},
        )
    except PaymentRequiredError as e:
        return PlainTextResponse(e.message, status_code=402)
    except MissingPurchaseKeyError as e:
        logger.warning("Paid session without photo key", extra={"checkout_session_id": session_id})
        return PlainTextResponse(e.message, status_code=400)
    except StorageError as e:
        logger.warning("download S3 error", extra={"checkout_session_id": session_id, "error": str(e)})
        return PlainTextResponse("Not found", status_code=404)
    except Exception as e:
        logger.exception("download failed", extra={"checkout_session_id": session_id, "error": str(e)})
        return PlainTextResponse(f"download failed: {e}", status_code=500)

    logger.info("Releasing purchased photo", extra={"checkout_session_id": session_id, "s3_key": key})
    return response
