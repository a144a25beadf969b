"""
License domain events.

Events raised by administrative operations on license records.
"""

from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent


class LicenseEvent(DomainEvent):
    """Common constructor for events keyed by license key."""

    def __init__(self, license_key: str, occurred_at: Optional[datetime] = None):
        super().__init__(
            event_id=DomainEvent.new_id(),
            occurred_at=occurred_at or DomainEvent.utcnow(),
            aggregate_id=license_key,
            event_type=type(self).__name__,
        )


class LicenseCreated(LicenseEvent):
    """Event raised when a license key is issued."""


class LicenseStatusChanged(LicenseEvent):
    """Event raised when an operator changes a license status."""

    def __init__(
        self,
        license_key: str,
        new_status: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize LicenseStatusChanged event.

        Args:
            license_key: License key
            new_status: Status assigned by the operator
            occurred_at: When the event occurred
        """
        super().__init__(license_key, occurred_at)
        self.new_status = new_status


class LicenseSessionReset(LicenseEvent):
    """Event raised when an operator clears a session binding."""


class LicenseDeleted(LicenseEvent):
    """Event raised when a license key is permanently removed."""
