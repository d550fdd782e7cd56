"""
SQLAlchemy Order Repository Implementation.

Implements OrderRepository over an async session factory.
"""
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.domain.entities import Order
from storefront.domain.exceptions import OrderNotFoundError
from storefront.domain.repositories import OrderRepository

from ..mappers import OrderItemMapper, OrderMapper
from ..models import OrderModel
from .base import SQLAlchemyRepository


logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(SQLAlchemyRepository, OrderRepository):
    """
    SQLAlchemy implementation of OrderRepository.

    The order row and its item rows are always written in one transaction.
    Missing customers or products surface as sqlalchemy IntegrityError.
    """

    async def create(self, entity: Order) -> None:
        """
        Insert the order row and one row per item.

        Args:
            entity: Order aggregate to persist
        """
        logger.info(f"Creating order: {entity.id} ({len(entity.items)} items)")

        async with self._writing() as session:
            session.add(OrderMapper.to_persistence(entity))

        logger.info(f"✅ Created order: {entity.id}")

    async def update(self, entity: Order) -> None:
        """
        Overwrite customer and total, then replace every item row.

        Existing item rows are deleted and flushed before the current items
        are inserted, so item ids may be reused across updates.

        Args:
            entity: Order aggregate carrying the new state
        """
        logger.info(f"Updating order: {entity.id}")

        async with self._writing() as session:
            order_model = await self._load(session, entity.id)
            if order_model is None:
                raise OrderNotFoundError(entity.id)

            order_model.customer_id = entity.customer_id
            order_model.total = entity.total()

            # Delete old items
            order_model.items.clear()
            await session.flush()

            # Insert current items
            order_model.items.extend(
                OrderItemMapper.to_persistence(item, entity.id)
                for item in entity.items
            )

        logger.info(f"✅ Updated order: {entity.id}")

    async def delete(self, order_id: str) -> None:
        logger.info(f"Deleting order: {order_id}")

        async with self._writing() as session:
            order_model = await self._load(session, order_id)
            if order_model is None:
                logger.warning(f"Order not found for deletion: {order_id}")
                raise OrderNotFoundError(order_id)
            await session.delete(order_model)

        logger.info(f"✅ Deleted order: {order_id}")

    async def find(self, entity_id: str) -> Optional[Order]:
        """
        Get order by ID with its items.

        Returns:
            Order aggregate if found, None otherwise
        """
        async with self._reading() as session:
            order_model = await self._load(session, entity_id)

            if order_model is None:
                logger.info(f"Order not found: {entity_id}")
                return None

            return OrderMapper.to_domain(order_model)

    async def find_all(self) -> List[Order]:
        async with self._reading() as session:
            order_models = await self._load_all(session)
            orders = [OrderMapper.to_domain(om) for om in order_models]

        logger.info(f"Found {len(orders)} orders")
        return orders

    async def find_projection(self, order_id: str) -> Optional[Dict[str, Any]]:
        async with self._reading() as session:
            order_model = await self._load(session, order_id)

            if order_model is None:
                logger.info(f"Order not found: {order_id}")
                return None

            return OrderMapper.to_projection(order_model)

    async def find_all_projections(self) -> List[Dict[str, Any]]:
        async with self._reading() as session:
            order_models = await self._load_all(session)
            return [OrderMapper.to_projection(om) for om in order_models]

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    @staticmethod
    async def _load(session: AsyncSession, order_id: str) -> Optional[OrderModel]:
        """Load one order with its items eagerly included."""
        result = await session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def _load_all(session: AsyncSession) -> List[OrderModel]:
        result = await session.execute(
            select(OrderModel).options(selectinload(OrderModel.items))
        )
        return list(result.scalars().all())
