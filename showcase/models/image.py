"""
Image domain models and schemas.

Request/response schemas for upload URL issuance, status polling
and the recent-images gallery. Field names on the wire are camelCase.

Dependencies: pydantic
System role: Image API contracts
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProcessingStatus(str, Enum):
    """Analysis state as observed through the document store."""

    PENDING = "pending"
    PROCESSED = "processed"


class UploadUrlRequest(BaseModel):
    """
    Request schema for generating a presigned upload URL.

    Both fields are optional here so a missing value is reported by the
    service layer as a ValidationError (400) instead of a schema 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    filename: str | None = Field(default=None, description="Object key and document id")
    content_type: str | None = Field(
        default=None,
        alias="contentType",
        description="MIME type the client will PUT with",
    )


class UploadUrlResponse(BaseModel):
    """Response schema with presigned URL for direct S3 upload."""

    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(description="Write-signed URL for the object")
    expires_at: str = Field(alias="expiresAt", description="ISO timestamp when URL expires")


class StatusResponse(BaseModel):
    """Response schema for status polling."""

    status: ProcessingStatus


class DominantColor(BaseModel):
    """One dominant colour reported by the analysis pipeline."""

    red: int = Field(ge=0, le=255)
    green: int = Field(ge=0, le=255)
    blue: int = Field(ge=0, le=255)


class AnalysisImageResponse(BaseModel):
    """Analysed image merged with a read-signed URL."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    file_name: str = Field(alias="fileName")
    detected_labels: list[str] = Field(default_factory=list, alias="detectedLabels")
    dominant_colors: list[DominantColor] = Field(default_factory=list, alias="dominantColors")
    processed_timestamp: datetime = Field(alias="processedTimestamp")
    image_url: str = Field(alias="imageUrl")
