"""
Binding domain events.

Domain events raised by the session binding engine's callers.
"""
from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent


class BindingEvent(DomainEvent):
    """Base for events about a key's session; carries the validation outcome."""

    outcome = None

    def __init__(
        self,
        license_key: str,
        address: Optional[str] = None,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(
            event_id=DomainEvent.new_id(),
            occurred_at=occurred_at or DomainEvent.utcnow(),
            aggregate_id=license_key,
            event_type=type(self).__name__,
        )
        self.address = address


class SessionBound(BindingEvent):
    """Event raised when a validation succeeds and the session is (re)bound."""

    outcome = "valid"


class SessionConflictRejected(BindingEvent):
    """Event raised when a live session elsewhere blocks a validation."""

    outcome = "session_conflict"


class ValidationRejected(BindingEvent):
    """Event raised when a validation fails for any other reason."""

    def __init__(
        self,
        license_key: str,
        address: Optional[str],
        reason: str,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(license_key, address, occurred_at)
        self.reason = reason
        self.outcome = reason


class HeartbeatReceived(BindingEvent):
    """Event raised for every accepted heartbeat."""

    def __init__(
        self,
        license_key: str,
        touched: bool,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(license_key, None, occurred_at)
        self.touched = touched
