"""
S3 images bucket configuration.

Settings for the landing bucket that receives uploaded images and
for presigned URL expiry.

Dependencies: pydantic_settings
System role: S3 images bucket configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class S3ImagesSettings(BaseSettings):
    """Settings for S3 images bucket operations."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="S3_IMAGES_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="js-image-landing",
        description="S3 bucket that receives uploads and serves analysed images",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for S3 bucket",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom S3-compatible endpoint (leave unset for AWS)",
    )
    access_key_id: str | None = Field(
        default=None,
        description="Explicit access key; falls back to the default AWS credential chain",
    )
    secret_access_key: str | None = Field(
        default=None,
        description="Explicit secret key paired with access_key_id",
    )
    upload_url_expiry: int = Field(
        default=900,
        description="Write URL expiry in seconds (15 minutes)",
    )
    download_url_expiry: int = Field(
        default=3600,
        description="Read URL expiry in seconds (1 hour)",
    )
