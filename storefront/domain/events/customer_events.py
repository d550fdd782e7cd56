"""Customer domain events."""
from dataclasses import dataclass
from typing import Optional

from ..value_objects import Address
from .base import DomainEvent


@dataclass
class CustomerCreatedEvent(DomainEvent):
    """A new customer was registered."""

    customer_id: str = ""
    name: str = ""

    def __post_init__(self):
        if not self.aggregate_id and self.customer_id:
            object.__setattr__(self, "aggregate_id", self.customer_id)
        super().__post_init__()


@dataclass
class CustomerAddressChangedEvent(DomainEvent):
    """The address of a customer was replaced."""

    customer_id: str = ""
    name: str = ""
    address: Optional[Address] = None

    def __post_init__(self):
        if not self.aggregate_id and self.customer_id:
            object.__setattr__(self, "aggregate_id", self.customer_id)
        super().__post_init__()
