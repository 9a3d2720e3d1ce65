"""
Status service.

Reports whether the vision pipeline has written an analysis document
for a filename yet. Pure existence check with no side effects.

Dependencies: sqlalchemy, showcase.boundary.db.CRUD
System role: Analysis completion check for client polling
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from showcase.application.services.upload_validators import require_filename
from showcase.boundary.db.CRUD.analysis_document_crud import analysis_document_crud
from showcase.core.exceptions import ServiceError
from showcase.models.image import ProcessingStatus
from showcase.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class StatusService:
    """Analysis status lookup."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def check_status(self, filename: str | None) -> ProcessingStatus:
        """
        Look up the analysis document for a filename.

        Args:
            filename: Uploaded filename (document id)

        Returns:
            ProcessingStatus: PROCESSED if the document exists, PENDING otherwise

        Raises:
            ValidationError: filename missing
            ServiceError: document store unavailable
        """
        filename = require_filename(filename)

        try:
            found = await analysis_document_crud.exists(self.db, filename)
        except Exception as e:
            log_exception_with_context(
                logger, "Failed to check document status", e, file_name=filename
            )
            raise ServiceError(
                "Failed to check status",
                operation="check_status",
                details={"reason": str(e)},
            ) from e

        return ProcessingStatus.PROCESSED if found else ProcessingStatus.PENDING
