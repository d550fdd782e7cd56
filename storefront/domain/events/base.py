"""Shared shape of the events recorded by customers and products."""
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict
import uuid

_ENVELOPE = ("event_id", "event_type", "aggregate_id", "occurred_at")


@dataclass
class DomainEvent:
    """
    Something that happened to an aggregate.

    ``event_type`` is the concrete class name; dispatchers register
    handlers under it.
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str = field(init=False, default="")
    aggregate_id: str = field(default="")
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not self.event_type:
            object.__setattr__(self, "event_type", type(self).__name__)

    def to_dict(self) -> Dict[str, Any]:
        """Envelope fields plus the subclass payload under ``data``."""
        envelope = {name: getattr(self, name) for name in _ENVELOPE}
        envelope["occurred_at"] = self.occurred_at.isoformat()
        envelope["data"] = self._get_event_data()
        return envelope

    def _get_event_data(self) -> Dict[str, Any]:
        payload = {}
        for f in fields(self):
            if f.name in _ENVELOPE:
                continue
            value = getattr(self, f.name)
            # Decimals and value objects are rendered as text
            if isinstance(value, Decimal) or is_dataclass(value):
                value = str(value)
            payload[f.name] = value
        return payload
