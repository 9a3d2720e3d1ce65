"""
API request/response schemas.

Dependencies: pydantic
System role: HTTP API contracts
"""

from showcase.models.common import ErrorResponse
from showcase.models.image import (
    AnalysisImageResponse,
    DominantColor,
    ProcessingStatus,
    StatusResponse,
    UploadUrlRequest,
    UploadUrlResponse,
)

__all__ = [
    "AnalysisImageResponse",
    "DominantColor",
    "ErrorResponse",
    "ProcessingStatus",
    "StatusResponse",
    "UploadUrlRequest",
    "UploadUrlResponse",
]
