"""Tests for database settings and the engine lifecycle."""

import logging

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from storefront.infrastructure.database import lifecycle
from storefront.infrastructure.database.config import DatabaseSettings, create_engine
from storefront.infrastructure.logging import configure_logging, get_logger


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("DB_DATABASE_URL", raising=False)
    settings = DatabaseSettings(_env_file=None)

    assert settings.database_url.startswith("sqlite+aiosqlite://")
    assert settings.echo_sql is False
    assert settings.log_level == "INFO"
    assert settings.sqlite_foreign_keys is True


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DB_DATABASE_URL", "sqlite+aiosqlite:///./other.db")
    monkeypatch.setenv("DB_ECHO_SQL", "true")
    monkeypatch.setenv("DB_LOG_LEVEL", "DEBUG")

    settings = DatabaseSettings(_env_file=None)

    assert settings.database_url == "sqlite+aiosqlite:///./other.db"
    assert settings.echo_sql is True
    assert settings.log_level == "DEBUG"


def test_memory_engine_uses_static_pool():
    engine = create_engine("sqlite+aiosqlite:///:memory:", settings=DatabaseSettings(_env_file=None))

    assert type(engine.sync_engine.pool).__name__ == "StaticPool"


def test_get_session_factory_before_init():
    with pytest.raises(RuntimeError, match="Database not initialized"):
        lifecycle.get_session_factory()


@pytest.mark.asyncio
async def test_init_and_close_database():
    factory = await lifecycle.init_database("sqlite+aiosqlite:///:memory:")
    try:
        assert lifecycle.get_session_factory() is factory
        # A second init keeps the existing engine
        assert await lifecycle.init_database("sqlite+aiosqlite:///:memory:") is factory

        async with factory() as session:
            tables = await session.run_sync(
                lambda sync_session: inspect(sync_session.connection()).get_table_names()
            )
        assert set(tables) == {"customers", "products", "orders", "order_items"}
    finally:
        await lifecycle.close_database()

    with pytest.raises(RuntimeError):
        lifecycle.get_session_factory()


@pytest.mark.asyncio
async def test_failed_init_leaves_no_engine_behind(tmp_path):
    missing_dir = tmp_path / "missing"
    unreachable = f"sqlite+aiosqlite:///{missing_dir / 'db.sqlite'}"

    with pytest.raises(OperationalError):
        await lifecycle.init_database(unreachable)

    with pytest.raises(RuntimeError, match="Database not initialized"):
        lifecycle.get_session_factory()

    factory = await lifecycle.init_database("sqlite+aiosqlite:///:memory:")
    try:
        assert factory.kw["bind"].url.database == ":memory:"
    finally:
        await lifecycle.close_database()


def test_get_logger_shares_package_handler():
    logger = get_logger("storefront.tests.logging")
    get_logger("storefront.tests.other")
    root = configure_logging("debug")

    assert logger.name == "storefront.tests.logging"
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG

    configure_logging(logging.INFO)
    assert root.level == logging.INFO
