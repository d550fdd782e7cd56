"""Pytest configuration and shared fixtures."""

import pytest
import pytest_asyncio

from storefront.domain.entities import Customer, Product
from storefront.domain.value_objects import Address
from storefront.infrastructure.database.config import (
    DatabaseSettings,
    create_engine,
    create_session_factory,
)
from storefront.infrastructure.database.models import Base
from storefront.infrastructure.database.repositories import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
)


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine with a fresh schema."""
    engine = create_engine(
        TEST_DATABASE_URL,
        settings=DatabaseSettings(echo_sql=False, sqlite_foreign_keys=True),
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine):
    """Create test session factory."""
    yield create_session_factory(test_engine)


@pytest.fixture
def customer_repository(session_factory) -> SQLAlchemyCustomerRepository:
    return SQLAlchemyCustomerRepository(session_factory)


@pytest.fixture
def product_repository(session_factory) -> SQLAlchemyProductRepository:
    return SQLAlchemyProductRepository(session_factory)


@pytest.fixture
def order_repository(session_factory) -> SQLAlchemyOrderRepository:
    return SQLAlchemyOrderRepository(session_factory)


@pytest.fixture
def address() -> Address:
    return Address("Street 1", 1, "Zipcode 1", "City 1")


@pytest_asyncio.fixture
async def customer(customer_repository, address) -> Customer:
    """Customer "123" already stored."""
    customer = Customer("123", "Customer 1")
    customer.change_address(address)
    await customer_repository.create(customer)
    return customer


@pytest_asyncio.fixture
async def product(product_repository) -> Product:
    """Product "123" priced 10 already stored."""
    product = Product("123", "Product 1", 10)
    await product_repository.create(product)
    return product
