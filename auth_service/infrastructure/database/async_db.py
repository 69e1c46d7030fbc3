"""
Asynchronous Database Utilities Module

This module provides the asynchronous SQLAlchemy engine and session factory
used by the Postgres user store.

**Security Note**: Ensure that DATABASE_URL requests SSL when connecting over
untrusted networks. asyncpg does not accept `sslmode` in connect_args; it must
be expressed in the URL if required. The URL is never logged.

Key Components:
    - create_engine: Builds the asynchronous engine from settings.
    - create_session_factory: A factory for creating asynchronous sessions.
    - create_async_db_and_tables: Creates tables using the async engine.
"""

import logging
import urllib.parse as urlparse

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from auth_service.core.config.settings import Settings

logger = logging.getLogger(__name__)


def _build_async_url(database_url: str) -> str:
    """
    Build the asynchronous database URL.

    Replaces sync drivers with asyncpg and strips `sslmode`, which asyncpg
    handles differently.

    Returns:
        str: The cleaned asynchronous database URL.
    """
    async_url = database_url.replace("postgresql+psycopg2", "postgresql+asyncpg")
    if async_url.startswith("postgresql://"):
        async_url = async_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    parsed = urlparse.urlparse(async_url)
    query = dict(urlparse.parse_qsl(parsed.query))
    query.pop("sslmode", None)
    parsed = parsed._replace(query=urlparse.urlencode(query))
    return urlparse.urlunparse(parsed)


def create_engine(settings: Settings) -> AsyncEngine:
    url = make_url(_build_async_url(settings.DATABASE_URL.get_secret_value()))
    engine = create_async_engine(
        url,
        echo=settings.DATABASE_ECHO,
        pool_size=settings.POSTGRES_POOL_SIZE,
        max_overflow=settings.POSTGRES_MAX_OVERFLOW,
        pool_timeout=settings.POSTGRES_POOL_TIMEOUT,
        pool_pre_ping=True,
    )
    logger.debug("Async database engine created")
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def create_async_db_and_tables(engine: AsyncEngine) -> None:
    """
    Creates the tables defined in the SQLModel metadata.

    Production deployments run the alembic migrations instead; this is used
    for local development against a fresh database.
    """
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables created")
