"""
Selfie matching service.

Searches the face collection with an attendee's selfie and narrows the
hits to one event when requested.

Dependencies: lastnightpix.boundary.aws, lastnightpix.configs
System role: Match orchestration
"""

import logging

from fastapi.concurrency import run_in_threadpool

from lastnightpix.boundary.aws import FaceCollectionClient
from lastnightpix.configs.matching import MatchSettings
from lastnightpix.core.keys import event_filter_prefix
from lastnightpix.models.matching import FaceMatch

logger = logging.getLogger(__name__)


def filter_by_event(matches: list[FaceMatch], event: str | None) -> list[FaceMatch]:
    """Keep matches whose photo belongs to the event (all matches when event is empty)."""
    prefix = event_filter_prefix(event)
    if prefix is None:
        return list(matches)
    return [m for m in matches if m.external_image_id.startswith(prefix)]


def rank(matches: list[FaceMatch]) -> list[FaceMatch]:
    return sorted(matches, key=lambda m: m.similarity or 0.0, reverse=True)


class MatchService:
    """Find photos containing a selfie's face."""

    def __init__(self, faces: FaceCollectionClient, settings: MatchSettings | None = None) -> None:
        self.faces = faces
        self.settings = settings or MatchSettings()

    async def _search(self, image: bytes, threshold: float, max_faces: int) -> list[FaceMatch]:
        return await run_in_threadpool(self.faces.search_by_image, image, threshold, max_faces)

    async def find_best(self, image: bytes, event: str | None = None) -> FaceMatch | None:
        """
        Return the most similar photo for a selfie, or None.

        Raises:
            FaceRecognitionError: If the search fails
        """
        matches = await self._search(
            image, self.settings.single_threshold, self.settings.single_max_faces
        )
        ranked = rank(filter_by_event(matches, event))

        logger.info(
            "Single match search finished",
            extra={"event": event or None, "raw_hits": len(matches), "kept_hits": len(ranked)},
        )
        return ranked[0] if ranked else None

    async def find_gallery(self, image: bytes, event: str | None = None) -> list[FaceMatch]:
        """
        Return every photo matching a selfie, most similar first.

        Raises:
            FaceRecognitionError: If the search fails
        """
        matches = await self._search(
            image, self.settings.gallery_threshold, self.settings.gallery_max_faces
        )
        ranked = rank(filter_by_event(matches, event))

        logger.info(
            "Gallery search finished",
            extra={"event": event or None, "raw_hits": len(matches), "kept_hits": len(ranked)},
        )
        return ranked
