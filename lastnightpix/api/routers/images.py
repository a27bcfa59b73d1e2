"""
Image delivery API endpoints.

Routes:
- GET /preview-image?key= - Watermarked JPEG preview
- GET /proxy-image?key= - Original photo streamed from S3

Dependencies: lastnightpix.application.services
System role: Photo delivery HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse, Response, StreamingResponse

from lastnightpix.api.deps import get_image_service
from lastnightpix.api.routers.router_utils import iter_object_body
from lastnightpix.application.services import ImageService
from lastnightpix.core.exceptions import StorageError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["images"])

JPEG = "image/jpeg"


@router.get("/preview-image", response_class=Response)
async def preview_image(
    key: str | None = Query(default=None),
    image_service: ImageService = Depends(get_image_service),
):
    """
    Render a watermarked preview of a photo.

    Args:
        key: Photo S3 key
        image_service: Injected ImageService

    Returns:
        Response: JPEG preview bytes
    """
    if not key:
        return PlainTextResponse("Missing key", status_code=400)

    try:
        preview = await image_service.preview(key)
    except Exception as e:
        logger.exception("preview-image failed", extra={"s3_key": key, "error": str(e)})
        return PlainTextResponse("preview-image failed", status_code=500)

    return Response(content=preview, media_type=JPEG)


@router.get("/proxy-image", response_class=StreamingResponse)
async def proxy_image(
    key: str | None = Query(default=None),
    image_service: ImageService = Depends(get_image_service),
):
    """
    Stream the original photo without a watermark.

    Args:
        key: Photo S3 key
        image_service: Injected ImageService

    Returns:
        StreamingResponse: Original JPEG, privately cacheable for five minutes
    """
    if not key:
        return PlainTextResponse("Missing key", status_code=400)

    try:
        stored = await image_service.open_original(key)
    except StorageError as e:
        logger.warning("proxy-image S3 error", extra={"s3_key": key, "error": str(e)})
        return PlainTextResponse("Not found", status_code=404)
    except Exception as e:
        logger.exception("proxy-image failed", extra={"s3_key": key, "error": str(e)})
        return PlainTextResponse("proxy-image failed", status_code=500)

    return StreamingResponse(
        iter_object_body(stored.body, key),
        media_type=JPEG,
        headers={"Cache-Control": "private, max-age=300"},
    )
