"""
Event Dispatcher Implementation (Infrastructure Layer).

Keeps handlers in memory and calls them synchronously.
"""
import logging
from typing import Dict, List

from storefront.domain.event_dispatcher import EventDispatcher, EventHandler
from storefront.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)


class InMemoryEventDispatcher(EventDispatcher):
    """
    In-Memory Event Dispatcher.

    A failing handler is logged and does not stop delivery to the
    remaining handlers.
    """

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = {}

    @property
    def handlers(self) -> Dict[str, List[EventHandler]]:
        return self._handlers

    def register(self, event_name: str, handler: EventHandler) -> None:
        self._handlers.setdefault(event_name, []).append(handler)
        logger.debug(f"Registered {type(handler).__name__} for {event_name}")

    def unregister(self, event_name: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_name, [])
        if handler in handlers:
            handlers.remove(handler)
            logger.debug(f"Unregistered {type(handler).__name__} for {event_name}")

    def unregister_all(self) -> None:
        self._handlers = {}

    def notify(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(event.event_type, [])
        if not handlers:
            return

        logger.debug(f"Notifying {len(handlers)} handlers about {event.event_type}")

        for handler in handlers:
            try:
                handler.handle(event)
            except Exception as e:
                logger.error(f"Handler {type(handler).__name__} failed: {e}", exc_info=True)

