"""
Images API endpoints.

Routes: GET /images

Dependencies: showcase.application.services, showcase.models
System role: Gallery HTTP API
"""

from fastapi import APIRouter, Depends

from showcase.api.deps import get_gallery_service
from showcase.application.services import GalleryService
from showcase.models.common import ErrorResponse
from showcase.models.image import AnalysisImageResponse

router = APIRouter(prefix="/images", tags=["images"])


@router.get(
    "",
    response_model=list[AnalysisImageResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_images(
    gallery_service: GalleryService = Depends(get_gallery_service),
) -> list[AnalysisImageResponse]:
    """
    List the most recent analysed images, newest first.

    Each entry carries a read-signed imageUrl valid for one hour.

    Example Response:
        [
            {
                "id": "cat.jpg",
                "fileName": "cat.jpg",
                "detectedLabels": ["Cat", "Whiskers"],
                "dominantColors": [{"red": 120, "green": 98, "blue": 77}],
                "processedTimestamp": "2025-01-01T12:00:05Z",
                "imageUrl": "https://..."
            }
        ]
    """
    return await gallery_service.list_recent()
