"""
Image delivery service.

Dependencies: lastnightpix.boundary.aws, lastnightpix.core.watermark
System role: Preview and original photo delivery
"""

from fastapi.concurrency import run_in_threadpool

from lastnightpix.boundary.aws import S3PhotoClient
from lastnightpix.core.watermark import WatermarkRenderer
from lastnightpix.models.photo import StoredObject


class ImageService:
    """Serve watermarked previews and original photos."""

    def __init__(self, storage: S3PhotoClient, renderer: WatermarkRenderer) -> None:
        self.storage = storage
        self.renderer = renderer

    async def preview(self, key: str) -> bytes:
        """Fetch a photo and render its watermarked JPEG preview."""
        original = await run_in_threadpool(self.storage.get_photo_bytes, key)
        return await run_in_threadpool(self.renderer.render_preview, original)

    async def open_original(self, key: str) -> StoredObject:
        """Open the full-resolution photo for streaming."""
        return await run_in_threadpool(self.storage.open_photo, key)
