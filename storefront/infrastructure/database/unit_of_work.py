"""Unit of Work pattern for atomic transactions."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .repositories import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Hand the same session to every repository
    3. Atomic commit/rollback of all repository operations

    Nothing is committed unless commit() is called inside the block.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._customers: Optional[SQLAlchemyCustomerRepository] = None
        self._products: Optional[SQLAlchemyProductRepository] = None
        self._orders: Optional[SQLAlchemyOrderRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception and close the session."""
        if exc_type is not None:
            await self._session.rollback()
        await self._session.close()
        self._session = None
        self._customers = self._products = self._orders = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def customers(self) -> SQLAlchemyCustomerRepository:
        if self._customers is None:
            self._customers = SQLAlchemyCustomerRepository(session=self.session)
        return self._customers

    @property
    def products(self) -> SQLAlchemyProductRepository:
        if self._products is None:
            self._products = SQLAlchemyProductRepository(session=self.session)
        return self._products

    @property
    def orders(self) -> SQLAlchemyOrderRepository:
        if self._orders is None:
            self._orders = SQLAlchemyOrderRepository(session=self.session)
        return self._orders

    async def commit(self) -> None:
        """Commit all pending changes."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()


def create_uow(session_factory: async_sessionmaker[AsyncSession]) -> UnitOfWork:
    """Create a new Unit of Work instance."""
    return UnitOfWork(session_factory)
