"""
Customer entity.

CRITICAL: This file must contain ZERO imports from sqlalchemy or pydantic.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..events import CustomerAddressChangedEvent, CustomerCreatedEvent, DomainEvent
from ..value_objects import Address


@dataclass
class Customer:
    """
    Customer entity.

    A customer can only be activated once an address is known. Reward
    points accumulate through OrderService.place_order().
    """
    id: str
    name: str
    address: Optional[Address] = None
    active: bool = False
    reward_points: int = 0

    _domain_events: List[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self._validate()
        self._record_event(CustomerCreatedEvent(customer_id=self.id, name=self.name))

    def _validate(self) -> None:
        if not self.id:
            raise ValueError("Id is required")
        if not self.name:
            raise ValueError("Name is required")
        if self.reward_points < 0:
            raise ValueError("Reward points cannot be negative")

    def change_name(self, name: str) -> None:
        self.name = name
        self._validate()

    def change_address(self, address: Address) -> None:
        """Replace the customer's address and record the change."""
        self.address = address
        self._record_event(
            CustomerAddressChangedEvent(
                customer_id=self.id,
                name=self.name,
                address=address,
            )
        )

    def activate(self) -> None:
        """Business rule: an address is mandatory to activate a customer."""
        if self.address is None:
            raise ValueError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def is_active(self) -> bool:
        return self.active

    def add_reward_points(self, points: int) -> None:
        if points < 0:
            raise ValueError("Reward points to add cannot be negative")
        self.reward_points += points

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def get_domain_events(self) -> List[DomainEvent]:
        """Return a copy of the events recorded since the last clear."""
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)
