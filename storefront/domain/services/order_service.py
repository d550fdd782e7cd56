"""Order domain service."""
from decimal import Decimal
from typing import Iterable, List, Optional
import uuid

from ..entities.customer import Customer
from ..entities.order import Order, OrderItem


class OrderService:
    """Operations spanning several orders or an order and its customer."""

    @staticmethod
    def total(orders: Iterable[Order]) -> Decimal:
        """Sum the totals of many orders."""
        return sum((order.total() for order in orders), Decimal("0"))

    @staticmethod
    def place_order(
        customer: Customer,
        items: List[OrderItem],
        order_id: Optional[str] = None,
    ) -> Order:
        """
        Create an order for a customer and award reward points.

        The customer earns half of the order total, rounded down, in points.

        Args:
            customer: Customer placing the order
            items: Order items
            order_id: Order identifier, a uuid4 string when omitted

        Returns:
            The new Order
        """
        if not items:
            raise ValueError("Order must have at least one item")

        order = Order(
            id=order_id or str(uuid.uuid4()),
            customer_id=customer.id,
            items=items,
        )
        customer.add_reward_points(int(order.total() / 2))
        return order
