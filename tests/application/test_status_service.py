"""
Tests for StatusService against in-memory SQLite.

Dependencies: pytest, aiosqlite
System role: Status checker verification
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.application.services import StatusService
from showcase.core.exceptions import ServiceError, ValidationError
from showcase.models.image import ProcessingStatus


@pytest.mark.asyncio
async def test_pending_then_processed_once_document_written(test_async_db, insert_analysis):
    service = StatusService(test_async_db)

    assert await service.check_status("cat.jpg") is ProcessingStatus.PENDING
    assert await service.check_status("cat.jpg") is ProcessingStatus.PENDING

    await insert_analysis("cat.jpg")

    assert await service.check_status("cat.jpg") is ProcessingStatus.PROCESSED
    assert await service.check_status("cat.jpg") is ProcessingStatus.PROCESSED


@pytest.mark.asyncio
async def test_status_is_per_filename(test_async_db, insert_analysis):
    await insert_analysis("cat.jpg")
    service = StatusService(test_async_db)

    assert await service.check_status("dog.jpg") is ProcessingStatus.PENDING


@pytest.mark.asyncio
async def test_missing_filename_raises_validation_error(test_async_db):
    with pytest.raises(ValidationError):
        await StatusService(test_async_db).check_status(None)


@pytest.mark.asyncio
async def test_datastore_failure_raises_service_error():
    db = AsyncMock(spec=AsyncSession)
    db.execute = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
    )

    with pytest.raises(ServiceError) as exc_info:
        await StatusService(db).check_status("cat.jpg")

    assert exc_info.value.message == "Failed to check status"
