"""
Photo key helpers.

S3 key layout, Rekognition external image id mapping and the public image
URLs handed to the frontend.

Key format: event-photos/{event}/{epoch_ms}-{sanitized_filename}
External id: the S3 key with every "/" replaced by ":" (Rekognition does not
accept "/" in ExternalImageId).

Dependencies: None
System role: Key and identifier conventions shared by all layers
"""

import re
import time
from urllib.parse import quote

DEFAULT_EVENT = "default"
PHOTO_ROOT = "event-photos"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w.\-:/]+", re.ASCII)

# Characters JavaScript's encodeURIComponent leaves alone, beyond quote()'s own.
_URI_COMPONENT_SAFE = "!*'()"


def event_prefix(event: str | None) -> str:
    """Return the key prefix for an event, or the default event prefix."""
    event = (event or "").strip()
    return f"{PHOTO_ROOT}/{event or DEFAULT_EVENT}/"


def to_external_id(s3_key: str) -> str:
    return str(s3_key).replace("/", ":")


def from_external_id(external_id: str) -> str:
    return str(external_id).replace(":", "/")


def colon_prefix(prefix: str) -> str:
    """Convert a key prefix to the external id prefix used for event filtering."""
    return str(prefix).replace("/", ":")


def sanitize_filename(filename: str) -> str:
    """Collapse each run of unsafe characters into a single underscore."""
    return _UNSAFE_FILENAME_CHARS.sub("_", filename)


def now_ms() -> int:
    return int(time.time() * 1000)


def build_photo_key(event: str | None, filename: str | None, timestamp_ms: int | None = None) -> str:
    """
    Build a unique S3 key for an uploaded photo.

    Args:
        event: Optional event slug
        filename: Original filename from the upload (may be empty)
        timestamp_ms: Epoch milliseconds (defaults to now)

    Returns:
        str: Key under the event prefix
    """
    stamp = now_ms() if timestamp_ms is None else timestamp_ms
    original = sanitize_filename(filename or f"photo-{stamp}.jpg")
    return f"{event_prefix(event)}{stamp}-{original}"


def event_filter_prefix(event: str | None) -> str | None:
    """External id prefix to filter matches by, or None when no event is given."""
    event = (event or "").strip()
    if not event:
        return None
    return colon_prefix(event_prefix(event))


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def preview_url(s3_key: str) -> str:
    return f"/preview-image?key={encode_uri_component(s3_key)}"


def proxy_url(s3_key: str) -> str:
    return f"/proxy-image?key={encode_uri_component(s3_key)}"


def filename_from_key(s3_key: str) -> str:
    return s3_key.split("/")[-1]
