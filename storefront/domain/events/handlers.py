"""Domain event handlers."""
import logging

from ..event_dispatcher import EventHandler
from .customer_events import CustomerAddressChangedEvent, CustomerCreatedEvent
from .product_events import ProductCreatedEvent


logger = logging.getLogger(__name__)


class LogWhenCustomerIsCreatedHandler(EventHandler):
    def handle(self, event: CustomerCreatedEvent) -> None:
        logger.info(f"First log handler for event: {event.event_type} ({event.customer_id})")


class SecondLogWhenCustomerIsCreatedHandler(EventHandler):
    def handle(self, event: CustomerCreatedEvent) -> None:
        logger.info(f"Second log handler for event: {event.event_type} ({event.customer_id})")


class LogWhenCustomerAddressIsChangedHandler(EventHandler):
    def handle(self, event: CustomerAddressChangedEvent) -> None:
        logger.info(
            f"Customer address {event.customer_id}, {event.name} "
            f"changed to: {event.address}"
        )


class SendEmailWhenProductIsCreatedHandler(EventHandler):
    """Stands in for a mail gateway; only logs the notification."""

    def handle(self, event: ProductCreatedEvent) -> None:
        logger.info(f"Sending email: product {event.name} created at {event.price}")
