"""
Upload API endpoints.

Routes: POST /upload

Dependencies: showcase.application.services, showcase.models
System role: Signed-URL issuer HTTP API
"""

from fastapi import APIRouter, Depends

from showcase.api.deps import get_upload_service
from showcase.application.services import UploadService
from showcase.models.common import ErrorResponse
from showcase.models.image import UploadUrlRequest, UploadUrlResponse

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post(
    "",
    response_model=UploadUrlResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_upload_url(
    request: UploadUrlRequest,
    upload_service: UploadService = Depends(get_upload_service),
) -> UploadUrlResponse:
    """
    Generate a write-signed URL for direct S3 upload.

    The client PUTs the image bytes to the returned URL with the same
    Content-Type it sent here. The URL expires after 15 minutes.

    Raises:
        ValidationError (400): filename or contentType missing
        ServiceError (500): signing failed or backend not initialized
    """
    signed = upload_service.issue_upload_url(request.filename, request.content_type)
    return UploadUrlResponse(url=signed.url, expires_at=signed.expires_at.isoformat())
