"""
Rekognition client for the event face collection.

Indexes faces found in stored photos and searches the collection with a
selfie. Matching is delegated entirely to Rekognition.

Dependencies: boto3, botocore
System role: Face recognition boundary
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from lastnightpix.boundary.aws.session import create_client
from lastnightpix.core.exceptions import FaceRecognitionError
from lastnightpix.models.matching import FaceMatch

logger = logging.getLogger(__name__)


class FaceCollectionClient:
    """Rekognition client bound to one face collection."""

    def __init__(
        self,
        collection_id: str,
        region: str = "us-east-2",
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
    ) -> None:
        """
        Args:
            collection_id: Rekognition collection holding indexed faces
            region: AWS region of the collection
            access_key_id: Optional explicit access key
            secret_access_key: Optional explicit secret key
        """
        self._collection_id = collection_id
        self._client = create_client("rekognition", region, access_key_id, secret_access_key)

    def index_photo(self, bucket: str, key: str, external_id: str) -> list[str]:
        """
        Index every face in an S3 photo.

        Args:
            bucket: Bucket holding the photo
            key: Photo key
            external_id: ExternalImageId to tag the faces with

        Returns:
            list[str]: FaceIds added to the collection (empty when no face was found)

        Raises:
            FaceRecognitionError: If Rekognition rejects the request
        """
        try:
            response = self._client.index_faces(
                CollectionId=self._collection_id,
                Image={"S3Object": {"Bucket": bucket, "Name": key}},
                ExternalImageId=external_id,
                DetectionAttributes=[],
            )
        except (ClientError, BotoCoreError) as e:
            raise FaceRecognitionError(
                str(e),
                operation="index_faces",
                details={"s3_key": key, "collection_id": self._collection_id},
            ) from e

        face_ids = [
            record.get("Face", {}).get("FaceId", "")
            for record in response.get("FaceRecords") or []
        ]
        logger.info(
            "Faces indexed",
            extra={"s3_key": key, "external_id": external_id, "face_count": len(face_ids)},
        )
        return face_ids

    def search_by_image(self, image_bytes: bytes, threshold: float, max_faces: int) -> list[FaceMatch]:
        """
        Search the collection for faces matching the largest face in an image.

        Args:
            image_bytes: Encoded selfie
            threshold: Minimum similarity (0-100)
            max_faces: Maximum number of matches to return

        Returns:
            list[FaceMatch]: Matches as returned by Rekognition

        Raises:
            FaceRecognitionError: If the search fails (including no face in the image)
        """
        try:
            response = self._client.search_faces_by_image(
                CollectionId=self._collection_id,
                Image={"Bytes": image_bytes},
                FaceMatchThreshold=threshold,
                MaxFaces=max_faces,
            )
        except (ClientError, BotoCoreError) as e:
            raise FaceRecognitionError(
                str(e),
                operation="search_faces_by_image",
                details={"collection_id": self._collection_id},
            ) from e

        matches = []
        for hit in response.get("FaceMatches") or []:
            face = hit.get("Face") or {}
            matches.append(
                FaceMatch(
                    external_image_id=face.get("ExternalImageId") or "",
                    similarity=hit.get("Similarity") or 0.0,
                    face_id=face.get("FaceId"),
                )
            )
        return matches
