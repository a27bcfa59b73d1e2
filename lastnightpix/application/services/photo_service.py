"""
Photo upload service.

Stores a photographer's upload under its event prefix and indexes the
faces in it.

Dependencies: lastnightpix.boundary.aws, lastnightpix.core.keys
System role: Upload and indexing orchestration
"""

import logging

from fastapi.concurrency import run_in_threadpool

from lastnightpix.boundary.aws import FaceCollectionClient, S3PhotoClient
from lastnightpix.core.keys import build_photo_key, to_external_id
from lastnightpix.models.photo import IndexResult

logger = logging.getLogger(__name__)


class PhotoService:
    """Upload and index event photos."""

    def __init__(self, storage: S3PhotoClient, faces: FaceCollectionClient) -> None:
        self.storage = storage
        self.faces = faces

    async def upload_and_index(
        self,
        content: bytes,
        filename: str | None,
        content_type: str,
        event: str | None = None,
    ) -> IndexResult:
        """
        Store a photo and index its faces.

        The photo is stored before indexing because Rekognition reads it
        from the bucket. A failed index leaves the object in place.

        Args:
            content: Encoded photo
            filename: Original filename from the upload
            content_type: MIME type to store with the object
            event: Optional event slug

        Returns:
            IndexResult: Key, external id and face count

        Raises:
            StorageError: If the photo cannot be stored
            FaceRecognitionError: If indexing fails
        """
        s3_key = build_photo_key(event, filename)
        external_id = to_external_id(s3_key)

        await run_in_threadpool(self.storage.put_photo, s3_key, content, content_type)
        face_ids = await run_in_threadpool(
            self.faces.index_photo, self.storage.bucket, s3_key, external_id
        )

        logger.info(
            "Photo uploaded and indexed",
            extra={"s3_key": s3_key, "event": event or None, "indexed_faces": len(face_ids)},
        )
        return IndexResult(s3_key=s3_key, external_id=external_id, indexed_faces=len(face_ids))
