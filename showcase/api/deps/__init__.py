"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceRegistry,
    get_async_db,
    get_gallery_service,
    get_s3_image_client,
    get_service_registry,
    get_settings_dependency,
    get_status_service,
    get_upload_service,
)

__all__ = [
    "ServiceRegistry",
    "get_async_db",
    "get_gallery_service",
    "get_s3_image_client",
    "get_service_registry",
    "get_settings_dependency",
    "get_status_service",
    "get_upload_service",
]
