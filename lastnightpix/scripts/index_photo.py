"""
Upload and index a local photo.

Seeds the face collection from disk, e.g. with a reference selfie, using the
same bucket and collection as the API.
Run: python -m lastnightpix.scripts.index_photo myface.jpg [--event EVENT] [--key KEY]

Dependencies: lastnightpix.boundary.aws, lastnightpix.configs
"""

import argparse
import logging
import mimetypes
import sys
from pathlib import Path

from lastnightpix.boundary.aws import FaceCollectionClient, S3PhotoClient
from lastnightpix.configs import get_settings
from lastnightpix.core.exceptions import LastNightPixException
from lastnightpix.core.keys import build_photo_key, to_external_id
from lastnightpix.observability.logger import configure_logging

logger = logging.getLogger("lastnightpix.scripts.index_photo")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Upload a local photo to S3 and index its faces")
    parser.add_argument("path", type=Path, help="Image file to upload")
    parser.add_argument("--event", default="", help="Event slug used to build the key")
    parser.add_argument("--key", default=None, help="Explicit S3 key (overrides --event)")
    return parser.parse_args(argv)


def index_photo(
    path: Path,
    storage: S3PhotoClient,
    faces: FaceCollectionClient,
    key: str | None = None,
    event: str = "",
) -> list[str]:
    """
    Upload one file and index it.

    Returns:
        list[str]: FaceIds added to the collection
    """
    s3_key = key or build_photo_key(event, path.name)
    content_type = mimetypes.guess_type(path.name)[0] or "image/jpeg"

    storage.put_photo(s3_key, path.read_bytes(), content_type)
    logger.info("Uploaded %s to s3://%s/%s", path, storage.bucket, s3_key)

    return faces.index_photo(storage.bucket, s3_key, to_external_id(s3_key))


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if not args.path.is_file():
        logger.error("File not found: %s", args.path)
        return 2

    aws = settings.aws
    storage = S3PhotoClient(aws.bucket_name, aws.aws_region, aws.aws_access_key_id, aws.aws_secret_access_key)
    faces = FaceCollectionClient(aws.collection_id, aws.aws_region, aws.aws_access_key_id, aws.aws_secret_access_key)

    try:
        face_ids = index_photo(args.path, storage, faces, key=args.key, event=args.event)
    except (LastNightPixException, OSError) as e:
        logger.error("Error uploading/indexing: %s", e)
        return 1

    if face_ids:
        logger.info("Face indexed! FaceId: %s", face_ids[0])
    else:
        logger.warning("No face detected in the image.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
