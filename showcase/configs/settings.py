"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from showcase.configs.base import BaseSettings
from showcase.configs.database import DatabaseSettings
from showcase.configs.gallery import GallerySettings
from showcase.configs.polling import PollingSettings
from showcase.configs.s3_images import S3ImagesSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    s3_images: S3ImagesSettings = S3ImagesSettings()
    gallery: GallerySettings = GallerySettings()
    polling: PollingSettings = PollingSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from showcase.configs import get_settings
        settings = get_settings()
    """
    return Settings()
