"""
LicenseRecord domain entity.

This is the core domain entity of the service: a license key together
with its status and the network session currently bound to it.
It contains business logic and is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from core.domain.value_objects import LicenseStatus


def generate_license_key() -> str:
    """
    Generate a fresh, unguessable license key.

    Returns:
        Random UUID4 string
    """
    return str(uuid.uuid4())


@dataclass(frozen=True)
class LicenseRecord:
    """
    LicenseRecord domain entity.

    A session exists when ``bound_address`` is set; it is live while
    the last activity is within the session timeout. Instances are
    immutable; ``bind`` returns a new instance.
    """

    key: str
    status: str
    bound_address: Optional[str]
    last_seen_at: Optional[datetime]
    created_at: datetime

    def __post_init__(self):
        """Validate license record entity."""
        if not self.key or len(self.key.strip()) == 0:
            raise ValueError("License key cannot be empty")
        if len(self.key) > 64:
            raise ValueError("License key too long")
        if not self.status or len(self.status.strip()) == 0:
            raise ValueError("Status cannot be empty")
        if len(self.status) > 32:
            raise ValueError("Status too long")

    @classmethod
    def create(
        cls,
        key: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> "LicenseRecord":
        """
        Create a new, active, unbound LicenseRecord.

        Args:
            key: Optional key (generated if not provided)
            created_at: Optional creation time (defaults to now, UTC)

        Returns:
            LicenseRecord entity instance
        """
        return cls(
            key=key or generate_license_key(),
            status=LicenseStatus.ACTIVE.value,
            bound_address=None,
            last_seen_at=None,
            created_at=created_at or datetime.now(timezone.utc),
        )

    def is_active(self) -> bool:
        """Return True if the status permits validation."""
        return LicenseStatus.permits_validation(self.status)

    def is_session_live(self, now: datetime, timeout: timedelta) -> bool:
        """
        Check whether the bound session still holds the key.

        Args:
            now: Current time
            timeout: Inactivity window after which a session expires

        Returns:
            True if an address is bound and was seen within ``timeout``
        """
        if self.bound_address is None or self.last_seen_at is None:
            return False
        return now - self.last_seen_at < timeout

    def bind(self, address: str, now: datetime) -> "LicenseRecord":
        """Return a copy bound to ``address`` with activity at ``now``."""
        return replace(self, bound_address=address, last_seen_at=now)
