"""
Face matching configuration.

Similarity thresholds and result caps for selfie searches.

Dependencies: pydantic_settings
System role: Matching configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatchSettings(BaseSettings):
    """Thresholds for single-photo and gallery matching."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MATCH_",
        case_sensitive=False,
        extra="ignore",
    )

    single_threshold: float = Field(default=85.0, ge=0, le=100, description="FaceMatchThreshold for /match")
    single_max_faces: int = Field(default=5, ge=1, le=4096, description="MaxFaces for /match")
    gallery_threshold: float = Field(
        default=80.0, ge=0, le=100, description="FaceMatchThreshold for /match-gallery"
    )
    gallery_max_faces: int = Field(default=12, ge=1, le=4096, description="MaxFaces for /match-gallery")
