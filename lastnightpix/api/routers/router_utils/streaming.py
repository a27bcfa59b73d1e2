"""
Streaming response helpers.

Dependencies: lastnightpix.core.keys
System role: Chunked proxying of S3 object bodies and download headers
"""

import logging
from collections.abc import Iterator
from typing import Any
from urllib.parse import quote

from lastnightpix.core.keys import sanitize_filename

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def iter_object_body(body: Any, key: str, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yield an S3 streaming body in chunks and close it afterwards.

    Errors after the response has started cannot change the status code;
    they are logged and re-raised, which aborts the connection.
    """
    try:
        yield from body.iter_chunks(chunk_size=chunk_size)
    except Exception as e:
        logger.exception(
            "Photo stream interrupted",
            extra={"s3_key": key, "error": str(e)},
        )
        raise
    finally:
        body.close()


def attachment_disposition(filename: str) -> str:
    """
    Build a Content-Disposition header value for a download.

    Header values must be Latin-1, so non-ASCII names get a sanitised
    ``filename`` plus an RFC 5987 ``filename*`` with the UTF-8 name.
    """
    fallback = sanitize_filename(filename.replace('"', ""))
    if fallback == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"
