"""Application service for Order operations."""

from typing import List, Optional, Tuple
import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.application.dtos import OrderProjection
from storefront.domain.entities import OrderItem
from storefront.domain.exceptions import CustomerNotFoundError, ProductNotFoundError
from storefront.domain.services import OrderService
from storefront.infrastructure.database.repositories import SQLAlchemyOrderRepository
from storefront.infrastructure.database.unit_of_work import create_uow


logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Load customers and products the order refers to
    - Apply domain rules through OrderService
    - Persist via repositories in one Unit of Work
    - Return read projections
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._orders = SQLAlchemyOrderRepository(session_factory)

    async def place_order(
        self,
        customer_id: str,
        lines: List[Tuple[str, int]],
        order_id: Optional[str] = None,
    ) -> OrderProjection:
        """Place an order from (product_id, quantity) lines.

        Product name and price are copied into each item. The order and the
        customer's new reward points are committed together or not at all.

        Args:
            customer_id: Customer placing the order
            lines: (product_id, quantity) pairs
            order_id: Order ID, generated when omitted

        Returns:
            Projection of the stored order
        """
        uow = create_uow(self._session_factory)
        async with uow:
            customer = await uow.customers.find(customer_id)
            if customer is None:
                raise CustomerNotFoundError(customer_id)

            items = []
            for product_id, quantity in lines:
                product = await uow.products.find(product_id)
                if product is None:
                    raise ProductNotFoundError(product_id)
                items.append(
                    OrderItem(
                        id=str(uuid.uuid4()),
                        name=product.name,
                        price=product.price,
                        product_id=product.id,
                        quantity=quantity,
                    )
                )

            order = OrderService.place_order(customer, items, order_id=order_id)
            await uow.orders.create(order)
            await uow.customers.update(customer)

            # Atomic commit
            await uow.commit()

        logger.info(
            f"Order {order.id} placed for {customer.id} "
            f"(total: {order.total()}, reward points: {customer.reward_points})"
        )
        return OrderProjection.from_order(order)

    async def get_order(self, order_id: str) -> Optional[OrderProjection]:
        projection = await self._orders.find_projection(order_id)
        if projection is None:
            return None
        return OrderProjection.from_row(projection)

    async def list_orders(self) -> List[OrderProjection]:
        projections = await self._orders.find_all_projections()
        return [OrderProjection.from_row(p) for p in projections]
