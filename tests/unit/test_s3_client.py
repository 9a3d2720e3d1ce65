"""
Unit tests for S3ImageClient.

boto3 is patched; no AWS calls are made.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest

from showcase.boundary.aws.s3_client import MissingCredentialsError, S3ImageClient


@pytest.fixture
def boto_session():
    with patch("showcase.boundary.aws.s3_client.boto3.Session") as session_cls:
        session = MagicMock()
        session_cls.return_value = session
        session.client.return_value.generate_presigned_url.return_value = (
            "https://js-image-landing.s3.amazonaws.com/cat.jpg?X-Amz-Signature=abc"
        )
        yield session_cls, session


class TestPresignedUpload:
    def test_signs_put_object_for_key_and_content_type(self, boto_session):
        _, session = boto_session
        client = S3ImageClient(bucket="js-image-landing")

        url, _ = client.generate_presigned_upload_url("cat.jpg", "image/jpeg")

        assert url.startswith("https://js-image-landing.s3.amazonaws.com/cat.jpg")
        session.client.return_value.generate_presigned_url.assert_called_once_with(
            ClientMethod="put_object",
            Params={
                "Bucket": "js-image-landing",
                "Key": "cat.jpg",
                "ContentType": "image/jpeg",
            },
            ExpiresIn=900,
        )

    def test_expiry_is_exactly_fifteen_minutes_from_issuance(self, boto_session):
        client = S3ImageClient(bucket="js-image-landing")

        before = datetime.now(timezone.utc)
        _, expires_at = client.generate_presigned_upload_url("cat.jpg", "image/jpeg")
        after = datetime.now(timezone.utc)

        assert before + timedelta(minutes=15) <= expires_at <= after + timedelta(minutes=15)


class TestPresignedDownload:
    def test_signs_get_object_for_one_hour(self, boto_session):
        _, session = boto_session
        client = S3ImageClient(bucket="js-image-landing")

        before = datetime.now(timezone.utc)
        _, expires_at = client.generate_presigned_download_url("cat.jpg")

        session.client.return_value.generate_presigned_url.assert_called_once_with(
            ClientMethod="get_object",
            Params={"Bucket": "js-image-landing", "Key": "cat.jpg"},
            ExpiresIn=3600,
        )
        assert expires_at >= before + timedelta(hours=1)


class TestCredentials:
    def test_explicit_keys_are_passed_to_session(self, boto_session):
        session_cls, session = boto_session

        S3ImageClient(
            bucket="b",
            region="eu-west-1",
            endpoint_url="http://localhost:9000",
            access_key_id="AKIA",
            secret_access_key="secret",
        )

        session_cls.assert_called_once_with(
            aws_access_key_id="AKIA",
            aws_secret_access_key="secret",
            region_name="eu-west-1",
        )
        session.client.assert_called_once_with("s3", endpoint_url="http://localhost:9000")

    def test_verify_credentials_raises_when_chain_is_empty(self, boto_session):
        _, session = boto_session
        session.get_credentials.return_value = None
        client = S3ImageClient(bucket="b")

        with pytest.raises(MissingCredentialsError):
            client.verify_credentials()

    def test_verify_credentials_passes_with_credentials(self, boto_session):
        _, session = boto_session
        session.get_credentials.return_value = MagicMock()
        client = S3ImageClient(bucket="b")

        client.verify_credentials()
