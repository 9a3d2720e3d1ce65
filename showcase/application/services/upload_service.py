"""
Upload service.

Issues write-signed URLs so the browser can PUT an image straight to
the landing bucket. No object exists until the client performs the PUT.

Dependencies: showcase.boundary.aws, showcase.core.exceptions
System role: Signed-URL issuer
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from showcase.application.services.upload_validators import (
    validate_content_type,
    validate_filename,
)
from showcase.boundary.aws.s3_client import S3ImageClient
from showcase.core.exceptions import ServiceError
from showcase.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignedUpload:
    """Write-signed URL and its expiry."""

    url: str
    expires_at: datetime


class UploadService:
    """Signed-URL issuer for direct-to-storage uploads."""

    def __init__(self, s3_client: S3ImageClient, expires_in: int = 900) -> None:
        """
        Initialize upload service.

        Args:
            s3_client: S3 client for URL signing
            expires_in: Write URL lifetime in seconds
        """
        self.s3_client = s3_client
        self.expires_in = expires_in

    def issue_upload_url(
        self,
        filename: str | None,
        content_type: str | None,
    ) -> SignedUpload:
        """
        Generate a write URL scoped to one object key and content type.

        Args:
            filename: Object key (and future document id)
            content_type: MIME type the client must PUT with

        Returns:
            SignedUpload: URL plus expiry timestamp

        Raises:
            ValidationError: filename or content type missing/invalid
            ServiceError: URL signing failed
        """
        filename = validate_filename(filename)
        content_type = validate_content_type(content_type)

        try:
            url, expires_at = self.s3_client.generate_presigned_upload_url(
                s3_key=filename,
                content_type=content_type,
                expires_in=self.expires_in,
            )
        except Exception as e:
            log_exception_with_context(
                logger,
                "Failed to generate presigned upload URL",
                e,
                file_name=filename,
                content_type=content_type,
            )
            raise ServiceError(
                "Failed to create signed URL",
                operation="presign_upload",
                details={"reason": str(e)},
            ) from e

        log_with_context(
            logger,
            logging.INFO,
            "Presigned upload URL generated",
            file_name=filename,
            content_type=content_type,
        )
        return SignedUpload(url=url, expires_at=expires_at)
