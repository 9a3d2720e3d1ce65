"""
S3 client for the image landing bucket.

Issues presigned URLs only: write URLs for direct browser uploads and
read URLs for the gallery. Object bytes never pass through the API.

Dependencies: boto3
System role: API-level S3 operations for presigned URLs
"""

from datetime import datetime, timedelta, timezone

import boto3


class MissingCredentialsError(RuntimeError):
    """Raised when no AWS credentials can be resolved for signing."""


class S3ImageClient:
    """S3 client for image bucket operations (presigned URLs only)."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
    ) -> None:
        """
        Initialize S3 client for the image bucket.

        Explicit keys take precedence; otherwise the default AWS credential
        chain (env, shared config, instance role) is used.

        Args:
            bucket: S3 bucket name for image storage
            region: AWS region for S3 bucket
            endpoint_url: Optional S3-compatible endpoint
            access_key_id: Optional explicit access key
            secret_access_key: Optional explicit secret key
        """
        self._bucket = bucket
        self._region = region
        self._session = boto3.Session(
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
            region_name=region,
        )
        self._s3_client = self._session.client("s3", endpoint_url=endpoint_url)

    @property
    def bucket(self) -> str:
        return self._bucket

    def verify_credentials(self) -> None:
        """
        Ensure credentials resolve so signing cannot silently produce unusable URLs.

        Raises:
            MissingCredentialsError: If the credential chain yields nothing
        """
        if self._session.get_credentials() is None:
            raise MissingCredentialsError(
                "No AWS credentials found for signing S3 URLs"
            )

    def generate_presigned_upload_url(
        self,
        s3_key: str,
        content_type: str,
        expires_in: int = 900,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for uploading an image.

        The signature covers the key and the content type, so the client
        must PUT with exactly this Content-Type header.

        Args:
            s3_key: S3 object key (the original filename)
            content_type: MIME type of the file
            expires_in: URL expiry in seconds (default 15 minutes)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            ClientError: If presigned URL generation fails
        """
        issued_at = datetime.now(timezone.utc)
        presigned_url = self._s3_client.generate_presigned_url(
            ClientMethod="put_object",
            Params={
                "Bucket": self._bucket,
                "Key": s3_key,
                "ContentType": content_type,
            },
            ExpiresIn=expires_in,
        )
        return presigned_url, issued_at + timedelta(seconds=expires_in)

    def generate_presigned_download_url(
        self,
        s3_key: str,
        expires_in: int = 3600,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for viewing an S3 object.

        Args:
            s3_key: S3 object key (path in bucket)
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            ClientError: If presigned URL generation fails
        """
        issued_at = datetime.now(timezone.utc)
        presigned_url = self._s3_client.generate_presigned_url(
            ClientMethod="get_object",
            Params={
                "Bucket": self._bucket,
                "Key": s3_key,
            },
            ExpiresIn=expires_in,
        )
        return presigned_url, issued_at + timedelta(seconds=expires_in)
