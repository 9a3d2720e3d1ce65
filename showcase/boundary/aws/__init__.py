"""AWS boundary: S3 presigned URL issuance."""

from showcase.boundary.aws.s3_client import S3ImageClient

__all__ = ["S3ImageClient"]
