"""
Selfie match API endpoints.

Routes:
- POST /match?event= - Best matching photo for a selfie
- POST /match-gallery?event= - All matching photos for a selfie

Dependencies: lastnightpix.application.services, lastnightpix.models
System role: Attendee search HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse

from lastnightpix.api.deps import get_match_service, get_settings_dependency
from lastnightpix.api.routers.router_utils import (
    NO_FILE_MESSAGE,
    UploadTooLargeError,
    read_image_upload,
)
from lastnightpix.application.services import MatchService
from lastnightpix.configs import Settings
from lastnightpix.core.keys import preview_url, proxy_url
from lastnightpix.models.matching import GalleryItem, GalleryResponse, MatchResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["matching"])


def _json(
    status_code: int,
    model: MatchResponse | GalleryResponse,
    exclude: set[str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=model.model_dump(by_alias=True, exclude_none=True, exclude=exclude),
    )


@router.post("/match", response_model=MatchResponse, response_model_exclude_none=True)
async def match_selfie(
    image: UploadFile | None = File(default=None),
    event: str = Query(default=""),
    match_service: MatchService = Depends(get_match_service),
    settings: Settings = Depends(get_settings_dependency),
):
    """
    Find the single best photo for a selfie.

    Args:
        image: Selfie file (multipart field "image")
        event: Optional event slug to restrict the search to
        match_service: Injected MatchService
        settings: Injected settings (upload limits)

    Returns:
        MatchResponse: Preview and full image URLs of the best match, or matchFound=false
    """
    if image is None:
        return _json(400, MatchResponse(match_found=False, error=NO_FILE_MESSAGE))

    try:
        selfie = await read_image_upload(image, settings.upload.max_bytes)
    except UploadTooLargeError as e:
        return _json(413, MatchResponse(match_found=False, error=str(e)))

    try:
        best = await match_service.find_best(selfie, event=event)
    except Exception as e:
        logger.exception("Matching failed", extra={"event": event or None, "error": str(e)})
        return PlainTextResponse(f"Matching failed: {e}", status_code=500)

    if best is None:
        return MatchResponse(match_found=False)

    s3_key = best.s3_key
    return MatchResponse(
        match_found=True,
        image_url=preview_url(s3_key),
        full_image_url=proxy_url(s3_key),
        similarity=best.similarity,
        s3_key=s3_key,
    )


@router.post("/match-gallery", response_model=GalleryResponse, response_model_exclude_none=True)
async def match_gallery(
    image: UploadFile | None = File(default=None),
    event: str = Query(default=""),
    match_service: MatchService = Depends(get_match_service),
    settings: Settings = Depends(get_settings_dependency),
):
    """
    Find every photo containing the selfie's face, most similar first.

    Args:
        image: Selfie file (multipart field "image")
        event: Optional event slug to restrict the search to
        match_service: Injected MatchService
        settings: Injected settings (upload limits)

    Returns:
        GalleryResponse: Matched keys with similarity and preview URLs
    """
    if image is None:
        return _json(400, GalleryResponse(match_found=False, error=NO_FILE_MESSAGE), exclude={"count", "results"})

    try:
        selfie = await read_image_upload(image, settings.upload.max_bytes)
    except UploadTooLargeError as e:
        return _json(413, GalleryResponse(match_found=False, error=str(e)), exclude={"count", "results"})

    try:
        matches = await match_service.find_gallery(selfie, event=event)
    except Exception as e:
        logger.exception("match-gallery failed", extra={"event": event or None, "error": str(e)})
        return _json(
            500,
            GalleryResponse(match_found=False, error=f"match-gallery failed: {e}"),
            exclude={"count"},
        )

    results = [
        GalleryItem(key=m.s3_key, similarity=m.similarity, image_url=preview_url(m.s3_key))
        for m in matches
    ]
    return GalleryResponse(match_found=bool(results), count=len(results), results=results)
