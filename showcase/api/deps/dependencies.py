"""
Dependency injection container.

Backend clients are bootstrapped once per process. A bootstrap failure is
captured in ServiceRegistry.init_error and every request touching a backend
then fails fast with the same diagnostic.

Dependencies: fastapi, sqlalchemy, showcase.configs, showcase.boundary
System role: DI container for service injection
"""

import logging
from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from showcase.application.services import GalleryService, StatusService, UploadService
from showcase.boundary.aws.s3_client import S3ImageClient
from showcase.boundary.db.connection import get_async_engine, get_async_session_factory
from showcase.configs import Settings, get_settings
from showcase.core.exceptions import ServiceError
from showcase.observability.log_utils import describe_error

logger = logging.getLogger(__name__)

CONFIGURATION_ERROR_MESSAGE = (
    "Server configuration error. Could not initialize backend services."
)


class ServiceRegistry:
    """Process-wide backend clients with an explicit initialization-failure flag."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._s3_client: S3ImageClient | None = None
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker | None = None
        self.init_error: str | None = None
        self.bootstrapped = False

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def bootstrap(self) -> None:
        """
        Build the S3 client and database session factory exactly once.

        Never raises; failures are recorded in init_error and logged.
        """
        if self.bootstrapped:
            return
        self.bootstrapped = True

        logger.info("Initializing backend clients")
        try:
            s3_config = self.settings.s3_images
            s3_client = S3ImageClient(
                bucket=s3_config.bucket,
                region=s3_config.region,
                endpoint_url=s3_config.endpoint_url,
                access_key_id=s3_config.access_key_id,
                secret_access_key=s3_config.secret_access_key,
            )
            s3_client.verify_credentials()

            engine = get_async_engine(self.settings.database)
            self._session_factory = get_async_session_factory(engine)
            self._engine = engine
            self._s3_client = s3_client
        except Exception as e:
            self.init_error = (
                f"Failed to initialize backend clients during startup: {e}"
            )
            logger.critical(self.init_error, extra=describe_error(e))
            return

        logger.info(
            "Backend clients initialized",
            extra={"bucket": self.settings.s3_images.bucket},
        )

    @property
    def ready(self) -> bool:
        return self.bootstrapped and self.init_error is None

    def _ensure_ready(self) -> None:
        self.bootstrap()
        if self.init_error is not None:
            raise ServiceError(
                CONFIGURATION_ERROR_MESSAGE,
                details={"reason": self.init_error},
            )

    @property
    def s3_client(self) -> S3ImageClient:
        """Get the shared S3 client, failing fast if bootstrap failed."""
        self._ensure_ready()
        return self._s3_client

    @property
    def session_factory(self) -> async_sessionmaker:
        """Get the shared session factory, failing fast if bootstrap failed."""
        self._ensure_ready()
        return self._session_factory

    async def dispose(self) -> None:
        """Release pooled connections and forget all clients."""
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        self._s3_client = None
        self.init_error = None
        self.bootstrapped = False


# Global service registry
_service_registry = ServiceRegistry()


def get_service_registry() -> ServiceRegistry:
    """Get service registry singleton."""
    return _service_registry


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_s3_image_client(
    registry: ServiceRegistry = Depends(get_service_registry),
) -> S3ImageClient:
    """Get the shared S3 client."""
    return registry.s3_client


async def get_async_db(
    registry: ServiceRegistry = Depends(get_service_registry),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped async database session with automatic cleanup.

    Yields:
        AsyncSession: Session closed after the route completes
    """
    session_factory = registry.session_factory
    async with session_factory() as session:
        yield session


def get_upload_service(
    s3_client: S3ImageClient = Depends(get_s3_image_client),
    settings: Settings = Depends(get_settings_dependency),
) -> UploadService:
    """Get upload service instance."""
    return UploadService(s3_client, expires_in=settings.s3_images.upload_url_expiry)


def get_status_service(db: AsyncSession = Depends(get_async_db)) -> StatusService:
    """Get status service instance."""
    return StatusService(db)


def get_gallery_service(
    db: AsyncSession = Depends(get_async_db),
    s3_client: S3ImageClient = Depends(get_s3_image_client),
    settings: Settings = Depends(get_settings_dependency),
) -> GalleryService:
    """Get gallery service instance."""
    return GalleryService(
        db,
        s3_client,
        recent_limit=settings.gallery.recent_limit,
        expires_in=settings.s3_images.download_url_expiry,
    )
