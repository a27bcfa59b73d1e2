"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from lastnightpix.configs.aws import AWSSettings
from lastnightpix.configs.base import BaseSettings
from lastnightpix.configs.images import PreviewSettings, UploadSettings
from lastnightpix.configs.matching import MatchSettings
from lastnightpix.configs.payments import StripeSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    aws: AWSSettings = Field(default_factory=AWSSettings)
    matching: MatchSettings = Field(default_factory=MatchSettings)
    stripe: StripeSettings = Field(default_factory=StripeSettings)
    upload: UploadSettings = Field(default_factory=UploadSettings)
    preview: PreviewSettings = Field(default_factory=PreviewSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are loaded once; call ``get_settings.cache_clear()``
    to reload them.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
