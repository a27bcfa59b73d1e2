"""
Multipart upload helpers.

Reads an uploaded image into memory while enforcing the size limit.

Dependencies: fastapi
System role: Upload validation shared by the upload and match routers
"""

from fastapi import UploadFile

NO_FILE_MESSAGE = 'No file uploaded. Field must be "image".'


class UploadTooLargeError(ValueError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        super().__init__(f"File too large. Maximum size: {max_bytes // (1024 * 1024)}MB")


async def read_image_upload(image: UploadFile, max_bytes: int) -> bytes:
    """
    Read an uploaded file, rejecting anything larger than ``max_bytes``.

    Args:
        image: Uploaded file from the ``image`` form field
        max_bytes: Maximum accepted size

    Returns:
        bytes: File content

    Raises:
        UploadTooLargeError: If the file is larger than ``max_bytes``
    """
    try:
        content = await image.read(max_bytes + 1)
    finally:
        await image.close()
    if len(content) > max_bytes:
        raise UploadTooLargeError(max_bytes)
    return content
