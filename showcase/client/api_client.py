"""
Async HTTP client for the showcase API.

Wraps the three API endpoints plus the direct-to-storage PUT. Every
transport or non-2xx failure is raised as a ServiceError carrying a
short, user-presentable message.

Dependencies: httpx, showcase.models, showcase.core.exceptions
System role: Client-side transport for the upload orchestrator and gallery
"""

import logging

import httpx
from pydantic import ValidationError as PydanticValidationError

from showcase.core.exceptions import ServiceError
from showcase.models.image import AnalysisImageResponse, ProcessingStatus

logger = logging.getLogger(__name__)


def _decode_json(
    response: httpx.Response, expected: type, message: str, operation: str
):
    """
    Decode a 2xx body, requiring a top-level JSON value of the expected type.

    Raises:
        ServiceError: Body is not JSON (e.g. a proxy error page) or has the wrong shape
    """
    try:
        payload = response.json()
    except ValueError as e:
        raise ServiceError(
            message,
            operation=operation,
            details={"status_code": response.status_code, "reason": f"invalid JSON body: {e}"},
        ) from e

    if not isinstance(payload, expected):
        raise ServiceError(
            message,
            operation=operation,
            details={"reason": f"expected JSON {expected.__name__}, got {type(payload).__name__}"},
        )
    return payload


class ShowcaseAPIClient:
    """Async client for /api/upload, /api/status, /api/images and signed PUTs."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize API client.

        Args:
            base_url: Root URL of the showcase API (e.g. http://localhost:8000)
            timeout: Per-request timeout in seconds
            http_client: Optional preconfigured client (tests inject a MockTransport)
        """
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "ShowcaseAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def request_upload_url(self, filename: str, content_type: str) -> str:
        """
        Ask the API for a write-signed URL.

        Returns:
            str: URL to PUT the file to

        Raises:
            ServiceError: Network failure or non-2xx response
        """
        try:
            response = await self._client.post(
                "/api/upload",
                json={"filename": filename, "contentType": content_type},
            )
        except httpx.HTTPError as e:
            raise ServiceError(
                f"Network error while preparing upload: {e}",
                operation="request_upload_url",
            ) from e

        if response.is_error:
            raise ServiceError(
                "Failed to get signed URL.",
                operation="request_upload_url",
                details={"status_code": response.status_code},
            )

        payload = _decode_json(
            response, dict, "Failed to get signed URL.", "request_upload_url"
        )
        url = payload.get("url")
        if not isinstance(url, str) or not url:
            raise ServiceError(
                "Failed to get signed URL.",
                operation="request_upload_url",
                details={"reason": "response carried no url"},
            )
        return url

    async def upload_file(self, url: str, data: bytes, content_type: str) -> None:
        """
        PUT file bytes straight to object storage.

        Args:
            url: Write-signed URL from request_upload_url
            data: File contents
            content_type: Must match the type the URL was signed for

        Raises:
            ServiceError: Network failure or non-2xx response
        """
        try:
            response = await self._client.put(
                url,
                content=data,
                headers={"Content-Type": content_type},
            )
        except httpx.HTTPError as e:
            raise ServiceError(
                "Upload to cloud storage failed.",
                operation="upload_file",
                details={"reason": str(e)},
            ) from e

        if response.is_error:
            raise ServiceError(
                "Upload to cloud storage failed.",
                operation="upload_file",
                details={"status_code": response.status_code},
            )

    async def get_status(self, filename: str) -> ProcessingStatus:
        """
        Check whether the analysis for filename exists yet.

        Raises:
            ServiceError: Network failure, non-2xx response or unknown status value
        """
        try:
            response = await self._client.get("/api/status", params={"filename": filename})
        except httpx.HTTPError as e:
            raise ServiceError(
                f"Network error while checking status: {e}",
                operation="get_status",
            ) from e

        if response.is_error:
            raise ServiceError(
                "Failed to check processing status.",
                operation="get_status",
                details={"status_code": response.status_code},
            )

        payload = _decode_json(
            response, dict, "Failed to check processing status.", "get_status"
        )
        try:
            return ProcessingStatus(payload.get("status"))
        except (TypeError, ValueError) as e:
            raise ServiceError(
                "Failed to check processing status.",
                operation="get_status",
                details={"reason": str(e)},
            ) from e

    async def list_images(self) -> list[AnalysisImageResponse]:
        """
        Fetch the recent analysed images.

        Raises:
            ServiceError: Network failure, non-2xx response or malformed payload
        """
        try:
            response = await self._client.get("/api/images")
        except httpx.HTTPError as e:
            raise ServiceError(
                f"Network error while fetching images: {e}",
                operation="list_images",
            ) from e

        if response.is_error:
            raise ServiceError(
                "Failed to fetch images.",
                operation="list_images",
                details={"status_code": response.status_code},
            )

        payload = _decode_json(response, list, "Failed to fetch images.", "list_images")
        try:
            return [AnalysisImageResponse.model_validate(item) for item in payload]
        except PydanticValidationError as e:
            raise ServiceError(
                "Failed to fetch images.",
                operation="list_images",
                details={"reason": str(e)},
            ) from e
