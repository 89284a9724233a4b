"""Async database engine and session factory construction.

The contact store owns one engine for the lifetime of the application;
these helpers only build it from the configured URL.
"""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.portfolio_contact.infrastructure.db.models import Base

logger = logging.getLogger(__name__)

_ASYNC_DRIVERS = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
    "postgresql+psycopg://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


def to_async_database_url(url: str) -> str:
    """Convert a database URL to its async driver variant.

    URLs that already name an async driver are returned unchanged.
    """
    for prefix, async_prefix in _ASYNC_DRIVERS.items():
        if url.startswith(prefix):
            return async_prefix + url[len(prefix):]
    return url


def create_engine_for_url(url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine for the configured database URL."""
    async_url = to_async_database_url(url)

    # Log only the part after the credentials
    safe_url = async_url.split("@")[-1] if "@" in async_url else async_url[:50]
    logger.debug(f"Database URL host: {safe_url}")

    if async_url.startswith("sqlite"):
        return create_async_engine(async_url, echo=echo)

    return create_async_engine(
        async_url,
        echo=echo,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the async session factory bound to ``engine``."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
