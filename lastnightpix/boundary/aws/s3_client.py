"""
S3 client for the event photo bucket.

Stores uploaded photos and reads them back for preview rendering and
full-resolution streaming.

Dependencies: boto3, botocore
System role: Object storage boundary
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from lastnightpix.boundary.aws.session import create_client
from lastnightpix.core.exceptions import PhotoNotFoundError, StorageError
from lastnightpix.models.photo import StoredObject

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"NoSuchKey", "404", "NotFound"}


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


class S3PhotoClient:
    """S3 client for photo bucket operations."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-2",
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
    ) -> None:
        """
        Initialize S3 client for the photo bucket.

        Args:
            bucket: S3 bucket name for photo storage
            region: AWS region for the bucket
            access_key_id: Optional explicit access key
            secret_access_key: Optional explicit secret key
        """
        self._bucket = bucket
        self._s3_client = create_client("s3", region, access_key_id, secret_access_key)

    @property
    def bucket(self) -> str:
        return self._bucket

    def put_photo(self, key: str, body: bytes, content_type: str = "image/jpeg") -> None:
        """
        Store a photo as a private object.

        Raises:
            StorageError: If the upload fails
        """
        try:
            self._s3_client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
                ACL="private",
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(str(e), key=key, operation="put") from e

        logger.info("Photo stored", extra={"s3_key": key, "size": len(body)})

    def _get_object(self, key: str) -> dict:
        try:
            return self._s3_client.get_object(Bucket=self._bucket, Key=key)
        except ClientError as e:
            if _error_code(e) in NOT_FOUND_CODES:
                raise PhotoNotFoundError(key) from e
            raise StorageError(str(e), key=key, operation="get") from e
        except BotoCoreError as e:
            raise StorageError(str(e), key=key, operation="get") from e

    def get_photo_bytes(self, key: str) -> bytes:
        """
        Read a whole photo into memory.

        Raises:
            PhotoNotFoundError: If the key does not exist
            StorageError: On any other S3 failure
        """
        response = self._get_object(key)
        body = response["Body"]
        try:
            return body.read()
        except (ClientError, BotoCoreError) as e:
            raise StorageError(str(e), key=key, operation="get") from e
        finally:
            body.close()

    def open_photo(self, key: str) -> StoredObject:
        """
        Open a photo for streaming.

        The caller owns the returned body and must close it.

        Raises:
            PhotoNotFoundError: If the key does not exist
            StorageError: On any other S3 failure
        """
        response = self._get_object(key)
        return StoredObject(
            key=key,
            body=response["Body"],
            content_type=response.get("ContentType"),
            content_length=response.get("ContentLength"),
        )

    def photo_exists(self, key: str) -> bool:
        """
        Check if a photo exists in S3.

        Args:
            key: S3 object key to check

        Returns:
            bool: True if the object exists, False otherwise

        Raises:
            StorageError: On any S3 failure other than a missing key
        """
        try:
            self._s3_client.head_object(Bucket=self._bucket, Key=key)
            return True
        except ClientError as e:
            if _error_code(e) in NOT_FOUND_CODES:
                return False
            raise StorageError(str(e), key=key, operation="head") from e
        except BotoCoreError as e:
            raise StorageError(str(e), key=key, operation="head") from e
