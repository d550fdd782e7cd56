"""
Database configuration.

Manages database connection settings and engine creation.
"""
from functools import lru_cache
from typing import Optional
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool


logger = logging.getLogger(__name__)


class DatabaseSettings(BaseSettings):
    """
    Database configuration settings.

    Loaded from environment variables (DB_*) or .env file.
    """

    database_url: str = "sqlite+aiosqlite:///./storefront.db"

    # Echo SQL (for debugging)
    echo_sql: bool = False

    # Level of the "storefront" package logger, applied by init_database()
    log_level: str = "INFO"

    # SQLite leaves foreign keys unchecked unless asked per connection
    sqlite_foreign_keys: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        extra="ignore",
    )


@lru_cache()
def get_database_settings() -> DatabaseSettings:
    """Return cached database settings."""
    return DatabaseSettings()


# =============================================================================
# ENGINE CREATION
# =============================================================================

def create_engine(
    database_url: Optional[str] = None,
    settings: Optional[DatabaseSettings] = None,
) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    In-memory SQLite URLs get a StaticPool so every session shares the one
    connection holding the database.

    Args:
        database_url: Overrides settings.database_url when given
        settings: Settings to use, cached settings when omitted

    Returns:
        Configured async engine
    """
    settings = settings or get_database_settings()
    url = make_url(database_url or settings.database_url)
    is_sqlite = url.get_backend_name() == "sqlite"

    logger.info(f"Creating database engine: {url.render_as_string(hide_password=True)}")

    kwargs = {"echo": settings.echo_sql}
    if is_sqlite and url.database in (None, "", ":memory:"):
        kwargs["connect_args"] = {"check_same_thread": False}
        kwargs["poolclass"] = StaticPool
    elif not is_sqlite:
        kwargs["pool_pre_ping"] = True  # Test connections before using

    engine = create_async_engine(url, **kwargs)

    if is_sqlite and settings.sqlite_foreign_keys:
        _enable_sqlite_foreign_keys(engine)

    return engine


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# =============================================================================
# SESSION FACTORY
# =============================================================================

def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create session factory bound to an engine.

    Returns:
        Session factory for creating sessions
    """
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
