"""Application lifecycle management.

This module handles application startup and shutdown, building the
authentication container on startup and releasing its resources on shutdown.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from structlog import get_logger

from auth_service.core.config.settings import Settings
from auth_service.infrastructure.database import create_async_db_and_tables
from auth_service.infrastructure.dependency_injection import build_container

logger = get_logger(__name__)


def create_lifespan_manager(settings: Settings):
    """Create the application lifespan manager.

    Args:
        settings: Settings the container is built from.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Builds the container on startup and closes it on shutdown.

        The container is exposed as `app.state.container`. In development the
        users table is created directly; other environments run the alembic
        migrations.
        """
        container = build_container(settings)
        app.state.container = container
        if container.engine is not None and settings.APP_ENV == "development":
            await create_async_db_and_tables(container.engine)
        logger.info(
            "application_startup",
            env=settings.APP_ENV,
            version=settings.VERSION,
            store_backend=settings.STORE_BACKEND,
        )

        yield

        await container.close()
        logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
