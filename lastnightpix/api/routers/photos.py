"""
Photo upload API endpoint.

Routes:
- POST /upload?event= - Store a photo (multipart field "image") and index its faces

Dependencies: lastnightpix.application.services, lastnightpix.models
System role: Photographer upload HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import JSONResponse

from lastnightpix.api.deps import get_photo_service, get_settings_dependency
from lastnightpix.api.routers.router_utils import (
    NO_FILE_MESSAGE,
    UploadTooLargeError,
    read_image_upload,
)
from lastnightpix.application.services import PhotoService
from lastnightpix.configs import Settings
from lastnightpix.models.photo import UploadErrorResponse, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["photos"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=UploadErrorResponse(error=message).model_dump())


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": UploadErrorResponse}, 413: {"model": UploadErrorResponse}, 500: {"model": UploadErrorResponse}},
)
async def upload_photo(
    image: UploadFile | None = File(default=None),
    event: str = Query(default=""),
    photo_service: PhotoService = Depends(get_photo_service),
    settings: Settings = Depends(get_settings_dependency),
):
    """
    Upload an event photo and index the faces in it.

    Args:
        image: Photo file (multipart field "image")
        event: Optional event slug; photos without one go to the default event
        photo_service: Injected PhotoService
        settings: Injected settings (upload limits)

    Returns:
        UploadResponse: S3 key, external id and number of indexed faces
    """
    if image is None:
        return _error(400, NO_FILE_MESSAGE)

    event = event.strip()
    try:
        content = await read_image_upload(image, settings.upload.max_bytes)
    except UploadTooLargeError as e:
        logger.warning("Upload rejected: too large", extra={"file_name": image.filename})
        return _error(413, str(e))

    logger.info(
        "Photo upload received",
        extra={"file_name": image.filename, "event": event or None, "size": len(content)},
    )

    try:
        result = await photo_service.upload_and_index(
            content=content,
            filename=image.filename,
            content_type=image.content_type or settings.upload.default_content_type,
            event=event,
        )
    except Exception as e:
        logger.exception(
            "Upload/index failed",
            extra={"file_name": image.filename, "event": event or None, "error": str(e)},
        )
        return _error(500, f"Upload/index failed: {e}")

    return UploadResponse(
        s3_key=result.s3_key,
        external_id=result.external_id,
        indexed_faces=result.indexed_faces,
    )
