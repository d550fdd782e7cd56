"""
Event Dispatcher Interface (Domain Layer).

Pure interface definition - no implementation details.
"""
from abc import ABC, abstractmethod

from .events.base import DomainEvent


class EventHandler(ABC):
    """Reacts to one kind of domain event."""

    @abstractmethod
    def handle(self, event: DomainEvent) -> None:
        pass


class EventDispatcher(ABC):
    """
    Event Dispatcher Interface.

    Handlers are registered per event type name (the event class name,
    e.g. "CustomerCreatedEvent") and called in registration order.
    """

    @abstractmethod
    def register(self, event_name: str, handler: EventHandler) -> None:
        pass

    @abstractmethod
    def unregister(self, event_name: str, handler: EventHandler) -> None:
        pass

    @abstractmethod
    def unregister_all(self) -> None:
        pass

    @abstractmethod
    def notify(self, event: DomainEvent) -> None:
        """
        Deliver an event to every handler registered for its type.

        Args:
            event: Domain event to deliver
        """
        pass
