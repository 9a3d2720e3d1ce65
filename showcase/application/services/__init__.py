"""
Application services.

Exports:
  - UploadService: Signed write URL issuance
  - StatusService: Analysis existence check
  - GalleryService: Recent analysed images with read URLs
"""

from showcase.application.services.gallery_service import GalleryService
from showcase.application.services.status_service import StatusService
from showcase.application.services.upload_service import SignedUpload, UploadService

__all__ = [
    "GalleryService",
    "SignedUpload",
    "StatusService",
    "UploadService",
]
