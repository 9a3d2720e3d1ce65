"""
Gallery service.

Lists the most recent analysed images, each merged with a short-lived
read URL. A single signing failure fails the whole listing.

Dependencies: sqlalchemy, showcase.boundary, showcase.core.exceptions
System role: Image lister
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from showcase.boundary.aws.s3_client import S3ImageClient
from showcase.boundary.db.CRUD.analysis_document_crud import analysis_document_crud
from showcase.boundary.db.models.analysis_document_model import AnalysisDocumentModel
from showcase.core.exceptions import ServiceError
from showcase.models.image import AnalysisImageResponse
from showcase.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class GalleryService:
    """Recent-images listing with signed read URLs."""

    def __init__(
        self,
        db: AsyncSession,
        s3_client: S3ImageClient,
        recent_limit: int = 6,
        expires_in: int = 3600,
    ) -> None:
        """
        Initialize gallery service.

        Args:
            db: AsyncSession for document lookups
            s3_client: S3 client for read URL signing
            recent_limit: Maximum number of images returned
            expires_in: Read URL lifetime in seconds
        """
        self.db = db
        self.s3_client = s3_client
        self.recent_limit = recent_limit
        self.expires_in = expires_in

    async def list_recent(self) -> list[AnalysisImageResponse]:
        """
        Return the newest analysed images with read URLs.

        Returns:
            list[AnalysisImageResponse]: At most recent_limit entries, newest first

        Raises:
            ServiceError: document store or URL signing failed
        """
        try:
            documents = await analysis_document_crud.get_recent(
                self.db, limit=self.recent_limit
            )
        except Exception as e:
            log_exception_with_context(logger, "Failed to fetch analysed images", e)
            raise ServiceError(
                "Failed to fetch images",
                operation="list_images",
                details={"reason": str(e)},
            ) from e

        return [self._with_image_url(document) for document in documents]

    def _with_image_url(self, document: AnalysisDocumentModel) -> AnalysisImageResponse:
        try:
            url, _ = self.s3_client.generate_presigned_download_url(
                s3_key=document.file_name,
                expires_in=self.expires_in,
            )
        except Exception as e:
            log_exception_with_context(
                logger,
                "Failed to sign image read URL",
                e,
                document_id=document.id,
            )
            raise ServiceError(
                "Failed to fetch images",
                operation="list_images",
                details={"reason": str(e), "document_id": document.id},
            ) from e

        return AnalysisImageResponse(
            id=document.id,
            file_name=document.file_name,
            detected_labels=list(document.detected_labels or []),
            dominant_colors=list(document.dominant_colors or []),
            processed_timestamp=document.processed_timestamp,
            image_url=url,
        )
