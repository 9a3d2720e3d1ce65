"""
Database models package.

Exports:
  - AnalysisDocumentModel: Analysis results written by the vision pipeline

Dependencies: sqlalchemy, showcase.boundary.db.base
System role: Database model definitions for domain entities
"""

from showcase.boundary.db.models.analysis_document_model import AnalysisDocumentModel

__all__ = ["AnalysisDocumentModel"]
