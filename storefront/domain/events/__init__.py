"""Domain events."""
from .base import DomainEvent
from .customer_events import CustomerAddressChangedEvent, CustomerCreatedEvent
from .product_events import ProductCreatedEvent

__all__ = [
    "DomainEvent",
    "CustomerCreatedEvent",
    "CustomerAddressChangedEvent",
    "ProductCreatedEvent",
]
