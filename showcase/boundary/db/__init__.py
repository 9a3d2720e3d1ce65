"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base: Model building block
  - get_async_engine(), get_async_session_factory(): Async connection management
  - AnalysisDocumentModel: Analysis result entity
  - analysis_document_crud: CRUD singleton

Dependencies: sqlalchemy, showcase.configs
System role: Document store adapter for analysis results
"""

from showcase.boundary.db.base import Base
from showcase.boundary.db.connection import get_async_engine, get_async_session_factory
from showcase.boundary.db.models.analysis_document_model import AnalysisDocumentModel
from showcase.boundary.db.CRUD import (
    AnalysisDocumentCRUD,
    BaseCRUD,
    analysis_document_crud,
)

__all__ = [
    "Base",
    "get_async_engine",
    "get_async_session_factory",
    "AnalysisDocumentModel",
    "AnalysisDocumentCRUD",
    "BaseCRUD",
    "analysis_document_crud",
]
