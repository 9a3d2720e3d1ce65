"""
Common response models.

Error schema shared by every endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Human-readable error message")
    details: dict | str | None = Field(default=None, description="Additional error context")
