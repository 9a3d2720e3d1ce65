"""
Tests for the ImageGallery view model.

Dependencies: pytest, pytest-asyncio, unittest.mock
System role: Gallery state verification
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import httpx
import pytest

from showcase.client.api_client import ShowcaseAPIClient
from showcase.client.gallery import ImageGallery
from showcase.core.exceptions import ServiceError
from showcase.models.image import AnalysisImageResponse


def _image(name: str) -> AnalysisImageResponse:
    return AnalysisImageResponse(
        id=name,
        file_name=name,
        detected_labels=["Dog"],
        dominant_colors=[],
        processed_timestamp=datetime(2025, 1, 1, tzinfo=timezone.utc),
        image_url=f"https://js-image-landing.s3.amazonaws.com/{name}",
    )


@pytest.fixture
def mock_api() -> AsyncMock:
    return AsyncMock(spec=ShowcaseAPIClient)


def test_gallery_starts_loading(mock_api):
    gallery = ImageGallery(mock_api)

    assert gallery.is_loading is True
    assert gallery.images == []
    assert gallery.error is None


@pytest.mark.asyncio
async def test_refresh_replaces_images(mock_api):
    mock_api.list_images.return_value = [_image("dog.jpg"), _image("cat.jpg")]
    gallery = ImageGallery(mock_api)

    images = await gallery.refresh()

    assert [image.id for image in images] == ["dog.jpg", "cat.jpg"]
    assert gallery.is_loading is False
    assert gallery.error is None


@pytest.mark.asyncio
async def test_refresh_failure_keeps_previous_images(mock_api):
    mock_api.list_images.side_effect = [
        [_image("dog.jpg")],
        ServiceError("Failed to fetch images."),
    ]
    gallery = ImageGallery(mock_api)

    await gallery.refresh()
    await gallery.refresh()

    assert [image.id for image in gallery.images] == ["dog.jpg"]
    assert gallery.error == "Failed to fetch images."
    assert gallery.is_loading is False


@pytest.mark.asyncio
async def test_successful_refresh_clears_error(mock_api):
    mock_api.list_images.side_effect = [ServiceError("Failed to fetch images."), []]
    gallery = ImageGallery(mock_api)

    await gallery.refresh()
    assert gallery.error == "Failed to fetch images."

    await gallery.refresh()
    assert gallery.error is None


@pytest.mark.asyncio
async def test_refresh_handles_non_json_gateway_page():
    http_client = httpx.AsyncClient(
        base_url="http://showcase.test",
        transport=httpx.MockTransport(
            lambda request: httpx.Response(200, text="<html>gateway</html>")
        ),
    )
    gallery = ImageGallery(ShowcaseAPIClient("http://showcase.test", http_client=http_client))

    images = await gallery.refresh()

    assert images == []
    assert gallery.error == "Failed to fetch images."
    assert gallery.is_loading is False
    await http_client.aclose()
