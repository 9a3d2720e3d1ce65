"""
Gallery view model.

Holds the recent-images list for display and refreshes it on demand,
typically when the upload orchestrator reports a finished analysis.

Dependencies: showcase.client.api_client
System role: Client-side image list state
"""

import logging

from showcase.client.api_client import ShowcaseAPIClient
from showcase.core.exceptions import ServiceError
from showcase.models.image import AnalysisImageResponse

logger = logging.getLogger(__name__)


class ImageGallery:
    """Recent analysed images plus loading and error state."""

    def __init__(self, api: ShowcaseAPIClient) -> None:
        self._api = api
        self.images: list[AnalysisImageResponse] = []
        self.error: str | None = None
        self.is_loading = True

    async def refresh(self) -> list[AnalysisImageResponse]:
        """
        Reload the image list. On failure the previous list is kept and
        the error message is exposed through `error`.
        """
        try:
            images = await self._api.list_images()
        except ServiceError as e:
            logger.warning("Gallery refresh failed", extra={"error": e.message})
            self.error = e.message
        else:
            self.images = images
            self.error = None
        finally:
            self.is_loading = False
        return self.images
