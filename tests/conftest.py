"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory document store, S3 client mocks, analysis document factory
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from showcase.boundary.aws.s3_client import S3ImageClient


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from showcase.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def base_time() -> datetime:
    """Fixed reference timestamp for ordering assertions."""
    return datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def insert_analysis(test_async_db, base_time):
    """
    Factory that writes an analysis document the way the vision pipeline does.

    Returns:
        Callable: async (filename, minutes_after_base, labels=None) -> AnalysisDocumentModel
    """
    from showcase.boundary.db.CRUD.analysis_document_crud import analysis_document_crud

    async def _insert(filename: str, minutes: int = 0, labels: list[str] | None = None):
        document = await analysis_document_crud.create(
            test_async_db,
            id=filename,
            file_name=filename,
            detected_labels=labels or ["Cat", "Whiskers"],
            dominant_colors=[{"red": 120, "green": 98, "blue": 77}],
            processed_timestamp=base_time + timedelta(minutes=minutes),
        )
        await test_async_db.commit()
        return document

    return _insert


@pytest.fixture
def mock_s3_client() -> MagicMock:
    """
    Create mock S3ImageClient that signs deterministic URLs.

    Returns:
        MagicMock: Mocked S3ImageClient
    """
    client = MagicMock(spec=S3ImageClient)

    def _download(s3_key: str, expires_in: int = 3600):
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return f"https://js-image-landing.s3.amazonaws.com/{s3_key}?X-Amz-Expires={expires_in}", expires_at

    def _upload(s3_key: str, content_type: str, expires_in: int = 900):
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return f"https://js-image-landing.s3.amazonaws.com/{s3_key}?X-Amz-Expires={expires_in}&put", expires_at

    client.generate_presigned_download_url.side_effect = _download
    client.generate_presigned_upload_url.side_effect = _upload
    return client
