"""Repository interface for Order aggregate."""

from abc import abstractmethod
from typing import Any, Dict, List, Optional

from ..entities.order import Order
from .base import Repository


class OrderRepository(Repository[Order]):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def delete(self, order_id: str) -> None:
        """Remove an order together with its items.

        Args:
            order_id: Order identifier
        """
        pass

    @abstractmethod
    async def find_projection(self, order_id: str) -> Optional[Dict[str, Any]]:
        """Retrieve the flattened row shape of an order.

        Args:
            order_id: Order identifier

        Returns:
            {id, customer_id, total, items: [...]} if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_projections(self) -> List[Dict[str, Any]]:
        """Return the projection of every stored order in insertion order."""
        pass
