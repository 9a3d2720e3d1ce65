"""
CRUD operations for database models.

Usage:
    from showcase.boundary.db.CRUD import analysis_document_crud

    processed = await analysis_document_crud.exists(db, "cat.jpg")
"""

from showcase.boundary.db.CRUD.base_crud import BaseCRUD
from showcase.boundary.db.CRUD.analysis_document_crud import (
    AnalysisDocumentCRUD,
    analysis_document_crud,
)

__all__ = [
    "BaseCRUD",
    "AnalysisDocumentCRUD",
    "analysis_document_crud",
]
