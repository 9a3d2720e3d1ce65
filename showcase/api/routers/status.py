"""
Status API endpoints.

Routes: GET /status?filename=...

Dependencies: showcase.application.services, showcase.models
System role: Analysis status HTTP API for client polling
"""

from fastapi import APIRouter, Depends, Query

from showcase.api.deps import get_status_service
from showcase.application.services import StatusService
from showcase.models.common import ErrorResponse
from showcase.models.image import StatusResponse

router = APIRouter(prefix="/status", tags=["status"])


@router.get(
    "",
    response_model=StatusResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_status(
    filename: str | None = Query(default=None),
    status_service: StatusService = Depends(get_status_service),
) -> StatusResponse:
    """
    Report whether the analysis for a filename has been written.

    Clients poll this every few seconds after a successful upload.

    Example Response:
        {"status": "pending"}
    """
    status = await status_service.check_status(filename)
    return StatusResponse(status=status)
