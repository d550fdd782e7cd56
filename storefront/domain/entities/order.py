"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from ..value_objects.money import to_amount


@dataclass
class OrderItem:
    """
    Individual line item within an order.

    Name and price are copied from the product when the order is placed so
    the order keeps its historical pricing if the product changes later.
    """
    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self):
        self.price = to_amount(self.price)
        if not self.id:
            raise ValueError("Id is required")
        if not self.product_id:
            raise ValueError("Product id is required")
        if self.price < 0:
            raise ValueError("Price must be greater than or equal to zero")
        if not isinstance(self.quantity, int) or self.quantity <= 0:
            raise ValueError("Quantity must be greater than 0")

    def total(self) -> Decimal:
        """Return price * quantity."""
        return self.price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    The total is never stored on the aggregate. total() sums the current
    items every time it is called, so it stays correct after
    change_items() or change_customer().
    """
    id: str
    customer_id: str
    items: List[OrderItem] = field(default_factory=list)

    def __post_init__(self):
        self.items = list(self.items)
        self._validate()

    def _validate(self) -> None:
        if not self.id:
            raise ValueError("Id is required")
        if not self.customer_id:
            raise ValueError("Customer id is required")
        if not self.items:
            raise ValueError("Items are required")
        seen = set()
        for item in self.items:
            if item.id in seen:
                raise ValueError(f"Item already in order: {item.id}")
            seen.add(item.id)

    def total(self) -> Decimal:
        """Sum of price * quantity over the current items."""
        return sum((item.total() for item in self.items), Decimal("0"))

    def change_customer(self, customer_id: str) -> None:
        """Reassign the order to another customer."""
        self.customer_id = customer_id
        self._validate()

    def change_items(self, items: List[OrderItem]) -> None:
        """Replace the whole item collection; the old items stay on failure."""
        previous = self.items
        self.items = list(items)
        try:
            self._validate()
        except ValueError:
            self.items = previous
            raise

    def add_item(self, item: OrderItem) -> None:
        self.change_items(self.items + [item])
