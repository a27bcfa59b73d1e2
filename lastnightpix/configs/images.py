"""
Image handling configuration.

Upload limits and watermarked preview rendering options.

Dependencies: pydantic_settings
System role: Image upload and preview configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class UploadSettings(BaseSettings):
    """Limits applied to multipart photo and selfie uploads."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="UPLOAD_",
        case_sensitive=False,
        extra="ignore",
    )

    max_bytes: int = Field(default=10 * 1024 * 1024, gt=0, description="Maximum upload size in bytes")
    default_content_type: str = Field(default="image/jpeg", description="Content type when none is sent")


class PreviewSettings(BaseSettings):
    """Watermark overlay and JPEG encoding for previews."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PREVIEW_",
        case_sensitive=False,
        extra="ignore",
    )

    watermark_text: str = Field(default="LASTNIGHTPIX • PREVIEW", description="Overlay text")
    font_size: int = Field(default=32, gt=0, description="Overlay font size in pixels")
    font_path: str | None = Field(
        default=None,
        description="TrueType font file; Pillow's bundled font is used when unset",
    )
    quality: int = Field(default=80, ge=1, le=95, description="JPEG quality of the preview")
    max_side: int = Field(
        default=2048,
        ge=0,
        description="Longest preview edge in pixels (0 keeps the original size)",
    )
