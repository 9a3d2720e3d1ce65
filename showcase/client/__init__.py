"""
Upload client.

Exports:
  - ShowcaseAPIClient: async HTTP transport for the API and signed PUTs
  - UploadOrchestrator, UploadState, SelectedFile, PollingPolicy: upload state machine
  - ImageGallery: recent-images view model refreshed after each upload
"""

from showcase.client.api_client import ShowcaseAPIClient
from showcase.client.gallery import ImageGallery
from showcase.client.orchestrator import (
    ACCEPTED_CONTENT_TYPES,
    CancellationToken,
    PollingPolicy,
    SelectedFile,
    UploadOrchestrator,
    UploadState,
)

__all__ = [
    "ACCEPTED_CONTENT_TYPES",
    "CancellationToken",
    "ImageGallery",
    "PollingPolicy",
    "SelectedFile",
    "ShowcaseAPIClient",
    "UploadOrchestrator",
    "UploadState",
]
