"""
Domain events base classes.

Domain events record something that happened to a license record
(created, bound, rejected, reset, ...). They decouple the engine and
the admin interface from side effects such as audit logging and metrics.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent(ABC):
    """
    Base class for all domain events.

    Subclasses add their payload as plain attributes after calling
    ``super().__init__``; the base fields stay immutable.
    """

    event_id: UUID
    occurred_at: datetime
    aggregate_id: str
    event_type: str

    def __init_subclass__(cls, **kwargs):
        """Automatically set event_type for subclasses."""
        super().__init_subclass__(**kwargs)
        cls.event_type = cls.__name__

    @staticmethod
    def new_id() -> UUID:
        return uuid4()

    @staticmethod
    def utcnow() -> datetime:
        return datetime.now(timezone.utc)

    def payload(self) -> Dict[str, Any]:
        """Event-specific attributes, excluding the base fields."""
        base = {"event_id", "occurred_at", "aggregate_id", "event_type"}
        return {
            name: (value.isoformat() if isinstance(value, datetime) else value)
            for name, value in vars(self).items()
            if name not in base
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_id": str(self.event_id),
            "occurred_at": self.occurred_at.isoformat(),
            "aggregate_id": self.aggregate_id,
            "event_type": self.event_type,
            "payload": self.payload(),
        }


class EventHandler(ABC):
    """Base class for event handlers."""

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        """
        Handle a domain event.

        Args:
            event: The domain event to handle
        """
        pass


class EventBus(ABC):
    """
    Abstract event bus for publishing and subscribing to domain events.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event.

        Args:
            event: The domain event to publish
        """
        pass

    @abstractmethod
    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        """
        Subscribe to a domain event type.

        Args:
            event_type: The type of event to subscribe to
            handler: The handler to call when event is published
        """
        pass
