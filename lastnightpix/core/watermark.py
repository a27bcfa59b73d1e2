"""
Watermarked preview rendering.

Draws a translucent label box with the preview text in the bottom-right
corner of a photo and re-encodes it as JPEG.

Dependencies: Pillow
System role: Preview image post-processing
"""

import io
import logging
import math

from PIL import Image, ImageDraw, ImageFont, ImageOps, UnidentifiedImageError

from lastnightpix.core.exceptions import ImageProcessingError

logger = logging.getLogger(__name__)

BOX_FILL = (0, 0, 0, 128)
TEXT_FILL = (255, 255, 255, 255)
MARGIN_RATIO = 0.03


class WatermarkRenderer:
    """Render JPEG previews with a text watermark."""

    def __init__(
        self,
        text: str = "LASTNIGHTPIX • PREVIEW",
        font_size: int = 32,
        font_path: str | None = None,
        quality: int = 80,
        max_side: int = 0,
    ) -> None:
        """
        Args:
            text: Watermark label
            font_size: Font size in pixels
            font_path: Optional TrueType font file
            quality: JPEG quality of the output
            max_side: Longest output edge in pixels, 0 to keep the source size
        """
        self.text = text
        self.quality = quality
        self.max_side = max_side
        self._font = self._load_font(font_path, font_size)

    @staticmethod
    def _load_font(font_path: str | None, font_size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
        if font_path:
            try:
                return ImageFont.truetype(font_path, font_size)
            except OSError:
                logger.warning(
                    "Watermark font could not be loaded, using default",
                    extra={"font_path": font_path},
                )
        return ImageFont.load_default(size=font_size)

    def _open(self, image_bytes: bytes) -> Image.Image:
        try:
            img = Image.open(io.BytesIO(image_bytes))
            img = ImageOps.exif_transpose(img)
            return img.convert("RGB")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise ImageProcessingError(
                f"Unable to decode image: {e}",
                {"size": len(image_bytes)},
            ) from e

    def render_preview(self, image_bytes: bytes) -> bytes:
        """
        Render a watermarked JPEG preview.

        Args:
            image_bytes: Encoded source image

        Returns:
            bytes: JPEG-encoded preview

        Raises:
            ImageProcessingError: If the source cannot be decoded
        """
        img = self._open(image_bytes)

        if self.max_side and max(img.size) > self.max_side:
            img.thumbnail((self.max_side, self.max_side), Image.Resampling.LANCZOS)

        canvas = img.convert("RGBA")
        width, height = canvas.size
        margin = math.floor(min(width, height) * MARGIN_RATIO)

        draw = ImageDraw.Draw(canvas)
        left, top, right, bottom = draw.textbbox((0, 0), self.text, font=self._font)
        text_w, text_h = right - left, bottom - top

        box_w = int(text_w + margin * 2)
        box_h = int(text_h + margin * 1.2)
        x = max(0, width - box_w - margin)
        y = max(0, height - box_h - margin)

        overlay = Image.new("RGBA", (box_w, box_h), BOX_FILL)
        canvas.alpha_composite(overlay, dest=(x, y))

        draw = ImageDraw.Draw(canvas)
        text_x = x + margin * 0.8 - left
        text_y = y + (box_h - text_h) / 2 - top
        draw.text((text_x, text_y), self.text, font=self._font, fill=TEXT_FILL)

        output = io.BytesIO()
        canvas.convert("RGB").save(output, format="JPEG", quality=self.quality)
        return output.getvalue()
