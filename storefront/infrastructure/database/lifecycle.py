"""Database Lifecycle Management - Async Version"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from storefront.infrastructure.database.config import (
    create_engine,
    create_session_factory,
    get_database_settings,
)
from storefront.infrastructure.database.models import Base
from storefront.infrastructure.logging import configure_logging, get_logger

logger = get_logger(__name__)

_async_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


async def init_database(
    database_url: Optional[str] = None,
    create_schema: bool = True,
) -> async_sessionmaker[AsyncSession]:
    """
    Initialize async database engine and session factory.

    Calling it again while initialized returns the existing factory.

    Args:
        database_url: Overrides the configured DB_DATABASE_URL
        create_schema: Create missing tables after connecting

    Returns:
        Process-wide session factory
    """
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        return _async_session_factory

    settings = get_database_settings()
    configure_logging(settings.log_level)

    engine = create_engine(database_url, settings=settings)
    try:
        if create_schema:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
    except Exception:
        logger.error("Database initialization failed, disposing engine")
        await engine.dispose()
        raise

    _async_engine = engine
    _async_session_factory = create_session_factory(engine)

    logger.info("✅ Database initialized successfully")
    return _async_session_factory


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    if _async_session_factory is None:
        raise RuntimeError(
            "Database not initialized. Call init_database() first."
        )
    return _async_session_factory


async def close_database() -> None:
    """Close async database engine."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        logger.info("Closing database connections...")
        await _async_engine.dispose()
        logger.info("✅ Database connections closed")

    _async_engine = None
    _async_session_factory = None
