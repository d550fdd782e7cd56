"""Generic repository interface shared by every aggregate."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract repository for aggregate persistence."""

    @abstractmethod
    async def create(self, entity: T) -> None:
        """Persist a new aggregate.

        Args:
            entity: Aggregate to insert
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Overwrite the stored state of an existing aggregate.

        Args:
            entity: Aggregate carrying the new state
        """
        pass

    @abstractmethod
    async def find(self, entity_id: str) -> Optional[T]:
        """Retrieve an aggregate by identity.

        Args:
            entity_id: Aggregate identifier

        Returns:
            The aggregate if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[T]:
        """Return every stored aggregate in insertion order."""
        pass
