"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, showcase.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from showcase.api.deps.dependencies import get_service_registry
from showcase.api.error_handlers import register_exception_handlers
from showcase.configs import get_settings
from showcase.observability.logger import configure_logging
from showcase.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    health_router,
    images_router,
    status_router,
    upload_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Bootstraps backend clients once; a failure is recorded in
    registry.init_error rather than raised.
    """
    configure_logging(get_settings().log_level)
    logger.info("Application startup: logging configured")

    registry = get_service_registry()
    registry.bootstrap()
    if registry.init_error:
        logger.critical("Backend services unavailable; requests will fail fast")

    yield

    # Shutdown
    await registry.dispose()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Vision Showcase API",
        description="Signed-URL image upload with asynchronous AI analysis",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Public demo: any origin may upload, poll and list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (added last = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router, prefix="/api")
    app.include_router(images_router, prefix="/api")
    app.include_router(status_router, prefix="/api")
    app.include_router(upload_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "showcase.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
