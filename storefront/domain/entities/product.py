"""Product entity."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from ..events import DomainEvent, ProductCreatedEvent
from ..value_objects.money import to_amount


@dataclass
class Product:
    """
    Catalog product.

    Price is always held as a Decimal in whole cents; other numbers are
    converted and rounded on construction and on change_price().
    """
    id: str
    name: str
    price: Decimal

    _domain_events: List[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self.price = to_amount(self.price)
        self._validate()
        self._record_event(
            ProductCreatedEvent(product_id=self.id, name=self.name, price=self.price)
        )

    def _validate(self) -> None:
        if not self.id:
            raise ValueError("Id is required")
        if not self.name:
            raise ValueError("Name is required")
        if self.price < 0:
            raise ValueError("Price must be greater than or equal to zero")

    def change_name(self, name: str) -> None:
        self.name = name
        self._validate()

    def change_price(self, price) -> None:
        self.price = to_amount(price)
        self._validate()

    def get_domain_events(self) -> List[DomainEvent]:
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)
