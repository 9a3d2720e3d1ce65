"""
Tests for ShowcaseAPIClient using httpx.MockTransport.

Dependencies: pytest, pytest-asyncio, httpx
System role: Client transport verification
"""

import json

import httpx
import pytest

from showcase.client.api_client import ShowcaseAPIClient
from showcase.core.exceptions import ServiceError
from showcase.models.image import ProcessingStatus

BASE_URL = "http://showcase.test"
SIGNED_URL = "https://js-image-landing.s3.amazonaws.com/cat.jpg?X-Amz-Signature=abc"


def _client(handler) -> ShowcaseAPIClient:
    http_client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return ShowcaseAPIClient(BASE_URL, http_client=http_client)


@pytest.mark.asyncio
async def test_request_upload_url_sends_camel_case_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"url": SIGNED_URL, "expiresAt": "2025-01-01T12:15:00Z"})

    url = await _client(handler).request_upload_url("cat.jpg", "image/jpeg")

    assert url == SIGNED_URL
    assert seen == {"path": "/api/upload", "body": {"filename": "cat.jpg", "contentType": "image/jpeg"}}


@pytest.mark.asyncio
async def test_request_upload_url_error_response():
    client = _client(lambda request: httpx.Response(500, json={"error": "Failed to create signed URL"}))

    with pytest.raises(ServiceError) as exc_info:
        await client.request_upload_url("cat.jpg", "image/jpeg")

    assert exc_info.value.message == "Failed to get signed URL."
    assert exc_info.value.details["status_code"] == 500


@pytest.mark.asyncio
async def test_request_upload_url_network_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ServiceError) as exc_info:
        await _client(handler).request_upload_url("cat.jpg", "image/jpeg")

    assert exc_info.value.message.startswith("Network error while preparing upload")


@pytest.mark.asyncio
async def test_upload_file_puts_bytes_with_content_type():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["host"] = request.url.host
        seen["content_type"] = request.headers["Content-Type"]
        seen["body"] = request.content
        return httpx.Response(200)

    await _client(handler).upload_file(SIGNED_URL, b"\xff\xd8\xff", "image/jpeg")

    assert seen == {
        "method": "PUT",
        "host": "js-image-landing.s3.amazonaws.com",
        "content_type": "image/jpeg",
        "body": b"\xff\xd8\xff",
    }


@pytest.mark.asyncio
async def test_upload_file_rejected_by_storage():
    client = _client(lambda request: httpx.Response(403, text="SignatureDoesNotMatch"))

    with pytest.raises(ServiceError) as exc_info:
        await client.upload_file(SIGNED_URL, b"data", "image/png")

    assert exc_info.value.message == "Upload to cloud storage failed."


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload,expected",
    [("pending", ProcessingStatus.PENDING), ("processed", ProcessingStatus.PROCESSED)],
)
async def test_get_status(payload, expected):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["filename"] == "cat.jpg"
        return httpx.Response(200, json={"status": payload})

    assert await _client(handler).get_status("cat.jpg") is expected


@pytest.mark.asyncio
async def test_get_status_unknown_value():
    client = _client(lambda request: httpx.Response(200, json={"status": "queued"}))

    with pytest.raises(ServiceError) as exc_info:
        await client.get_status("cat.jpg")

    assert exc_info.value.message == "Failed to check processing status."


@pytest.mark.asyncio
async def test_list_images_parses_camel_case():
    payload = [
        {
            "id": "cat.jpg",
            "fileName": "cat.jpg",
            "detectedLabels": ["Cat"],
            "dominantColors": [{"red": 1, "green": 2, "blue": 3}],
            "processedTimestamp": "2025-01-01T12:00:00Z",
            "imageUrl": "https://js-image-landing.s3.amazonaws.com/cat.jpg",
        }
    ]
    client = _client(lambda request: httpx.Response(200, json=payload))

    images = await client.list_images()

    assert len(images) == 1
    assert images[0].file_name == "cat.jpg"
    assert images[0].dominant_colors[0].blue == 3


@pytest.mark.asyncio
async def test_list_images_error_response():
    client = _client(lambda request: httpx.Response(500, json={"error": "Failed to fetch images"}))

    with pytest.raises(ServiceError) as exc_info:
        await client.list_images()

    assert exc_info.value.message == "Failed to fetch images."


@pytest.mark.asyncio
async def test_context_manager_keeps_injected_client_open():
    http_client = httpx.AsyncClient(
        base_url=BASE_URL, transport=httpx.MockTransport(lambda request: httpx.Response(200))
    )

    async with ShowcaseAPIClient(BASE_URL, http_client=http_client):
        pass

    assert http_client.is_closed is False
    await http_client.aclose()


def _gateway_page(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text="<html>gateway</html>")


@pytest.mark.asyncio
async def test_request_upload_url_non_json_body():
    with pytest.raises(ServiceError) as exc_info:
        await _client(_gateway_page).request_upload_url("cat.jpg", "image/jpeg")

    assert exc_info.value.message == "Failed to get signed URL."
    assert "invalid JSON body" in exc_info.value.details["reason"]


@pytest.mark.asyncio
async def test_get_status_non_json_body():
    with pytest.raises(ServiceError) as exc_info:
        await _client(_gateway_page).get_status("cat.jpg")

    assert exc_info.value.message == "Failed to check processing status."


@pytest.mark.asyncio
async def test_list_images_non_json_body():
    with pytest.raises(ServiceError) as exc_info:
        await _client(_gateway_page).list_images()

    assert exc_info.value.message == "Failed to fetch images."


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,args,body,message",
    [
        ("request_upload_url", ("cat.jpg", "image/jpeg"), ["https://x"], "Failed to get signed URL."),
        ("get_status", ("cat.jpg",), ["processed"], "Failed to check processing status."),
        ("list_images", (), {"images": []}, "Failed to fetch images."),
    ],
)
async def test_wrong_json_shape(method, args, body, message):
    client = _client(lambda request: httpx.Response(200, json=body))

    with pytest.raises(ServiceError) as exc_info:
        await getattr(client, method)(*args)

    assert exc_info.value.message == message
