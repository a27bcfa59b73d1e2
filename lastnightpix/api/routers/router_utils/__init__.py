"""Router helper utilities."""

from .streaming import attachment_disposition, iter_object_body
from .uploads import NO_FILE_MESSAGE, UploadTooLargeError, read_image_upload

__all__ = [
    "NO_FILE_MESSAGE",
    "UploadTooLargeError",
    "attachment_disposition",
    "iter_object_body",
    "read_image_upload",
]
