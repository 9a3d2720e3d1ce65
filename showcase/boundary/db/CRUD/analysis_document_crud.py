"""
Analysis document CRUD operations.

Read-side queries used by the status checker and the image lister.

Dependencies: sqlalchemy, showcase.boundary.db.models
System role: Analysis document lookups
"""

from typing import Sequence

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.boundary.db.CRUD.base_crud import BaseCRUD
from showcase.boundary.db.models.analysis_document_model import AnalysisDocumentModel


class AnalysisDocumentCRUD(BaseCRUD[AnalysisDocumentModel]):
    """CRUD operations for AnalysisDocumentModel."""

    def __init__(self) -> None:
        """Initialize AnalysisDocumentCRUD with AnalysisDocumentModel."""
        super().__init__(AnalysisDocumentModel)

    async def get_recent(
        self,
        session: AsyncSession,
        limit: int,
    ) -> Sequence[AnalysisDocumentModel]:
        """
        Retrieve the most recently processed documents, newest first.

        Args:
            session: Async database session
            limit: Maximum number of documents to return

        Returns:
            Sequence of AnalysisDocumentModel ordered by processed_timestamp desc
        """
        stmt = (
            select(AnalysisDocumentModel)
            .order_by(desc(AnalysisDocumentModel.processed_timestamp))
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


analysis_document_crud = AnalysisDocumentCRUD()
