"""API routers."""

from .health import router as health_router
from .images import router as images_router
from .status import router as status_router
from .upload import router as upload_router

__all__ = [
    "health_router",
    "images_router",
    "status_router",
    "upload_router",
]
