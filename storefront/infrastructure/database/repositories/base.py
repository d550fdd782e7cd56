"""Session handling shared by the SQLAlchemy repositories."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.domain.event_dispatcher import EventDispatcher


class SQLAlchemyRepository:
    """
    Base for repositories that run either standalone or inside a UnitOfWork.

    Standalone repositories open a session per call and commit it. When
    bound to a session, writes are only flushed; the owner of the session
    decides whether to commit.
    """

    def __init__(
        self,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
        dispatcher: Optional[EventDispatcher] = None,
        *,
        session: Optional[AsyncSession] = None,
    ):
        """
        Initialize repository.

        Args:
            session_factory: SQLAlchemy async session factory
            dispatcher: Optional event dispatcher for recorded events
            session: Session owned by a UnitOfWork, used instead of the factory
        """
        if session_factory is None and session is None:
            raise ValueError("Either session_factory or session is required")
        self._session_factory = session_factory
        self._session = session
        self._dispatcher = dispatcher

    @asynccontextmanager
    async def _reading(self) -> AsyncIterator[AsyncSession]:
        if self._session is not None:
            yield self._session
            return
        async with self._session_factory() as session:
            yield session

    @asynccontextmanager
    async def _writing(self) -> AsyncIterator[AsyncSession]:
        if self._session is not None:
            yield self._session
            await self._session.flush()
            return
        async with self._session_factory() as session:
            async with session.begin():
                yield session

    def _publish_events(self, entity) -> None:
        """Deliver and clear the events recorded on an entity."""
        if self._dispatcher is None:
            return
        for event in entity.get_domain_events():
            self._dispatcher.notify(event)
        entity.clear_domain_events()
