"""
Gallery configuration.

Dependencies: pydantic_settings
System role: Image list sizing
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GallerySettings(BaseSettings):
    """Settings for the recent-images listing."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GALLERY_",
        case_sensitive=False,
        extra="ignore",
    )

    recent_limit: int = Field(
        default=6,
        ge=1,
        description="Number of most recent analysed images returned by /api/images",
    )
