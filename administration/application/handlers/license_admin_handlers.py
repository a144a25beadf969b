"""
License administration handlers.

Handlers for the create, list, status, reset_session and delete admin
commands. Each handler performs one Record Store operation directly,
without the session binding checks, and returns the reply text for
the operator.
"""
import logging
from datetime import datetime, timedelta
from typing import Callable

from administration.domain.replies import code
from core.domain.events import EventBus
from core.domain.exceptions import DuplicateLicenseKeyError, InvalidRequestError
from licenses.domain.events import (
    LicenseCreated,
    LicenseDeleted,
    LicenseSessionReset,
    LicenseStatusChanged,
)
from licenses.domain.license_record import LicenseRecord
from licenses.ports.license_record_repository import LicenseRecordRepository

logger = logging.getLogger(__name__)

MAX_KEY_GENERATION_ATTEMPTS = 3
MAX_STATUS_LENGTH = 32


def _not_found(key: str) -> str:
    return f"Key {code(key)} not found."


class CreateLicenseHandler:
    """Handler for the create command."""

    def __init__(
        self,
        repository: LicenseRecordRepository,
        event_bus: EventBus,
        now_fn: Callable[[], datetime],
    ):
        """Initialize handler with repository, event bus and clock."""
        self.repository = repository
        self.event_bus = event_bus
        self.now_fn = now_fn

    async def handle(self) -> str:
        """
        Issue a new active, unbound license key.

        Returns:
            Reply text containing the new key

        Raises:
            DuplicateLicenseKeyError: If every generated key collided
        """
        for attempt in range(1, MAX_KEY_GENERATION_ATTEMPTS + 1):
            record = LicenseRecord.create(created_at=self.now_fn())
            try:
                await self.repository.add(record)
            except DuplicateLicenseKeyError:
                logger.warning("Generated key collided (attempt %s)", attempt)
                continue
            await self.event_bus.publish(LicenseCreated(license_key=record.key))
            return f"New key created successfully:\n\n{code(record.key)}"
        raise DuplicateLicenseKeyError("Could not generate a unique license key")


class ListLicensesHandler:
    """Handler for the list command."""

    def __init__(
        self,
        repository: LicenseRecordRepository,
        session_timeout: timedelta,
        now_fn: Callable[[], datetime],
    ):
        """Initialize handler with repository, session timeout and clock."""
        self.repository = repository
        self.session_timeout = session_timeout
        self.now_fn = now_fn

    def _format_record(self, record: LicenseRecord, now: datetime) -> str:
        if record.bound_address is None:
            session = "none"
        else:
            state = "live" if record.is_session_live(now, self.session_timeout) else "expired"
            session = f"{code(record.bound_address)} ({state})"
        last_seen = record.last_seen_at.isoformat() if record.last_seen_at else "never"
        return (
            f"Key: {code(record.key)}\n"
            f"Status: {code(record.status)}\n"
            f"Session: {session}\n"
            f"Last seen: {last_seen}"
        )

    async def handle(self) -> str:
        """
        Describe every license record.

        Returns:
            Reply text listing key, status, binding and last-seen time
        """
        records = await self.repository.list_all()
        response = "📜 *License List* 📜\n\n"
        if not records:
            return response + "No licenses found."
        now = self.now_fn()
        return response + "\n\n".join(self._format_record(record, now) for record in records)


class SetLicenseStatusHandler:
    """Handler for the status command."""

    def __init__(self, repository: LicenseRecordRepository, event_bus: EventBus):
        """Initialize handler with repository and event bus."""
        self.repository = repository
        self.event_bus = event_bus

    async def handle(self, key: str, new_status: str) -> str:
        """
        Change a license status. The session binding is left untouched.

        Args:
            key: License key
            new_status: Operator-assigned status

        Returns:
            Reply text

        Raises:
            InvalidRequestError: If the status is too long
        """
        if len(new_status) > MAX_STATUS_LENGTH:
            raise InvalidRequestError(f"Status must be at most {MAX_STATUS_LENGTH} characters")
        if not await self.repository.update_status(key, new_status):
            return _not_found(key)
        await self.event_bus.publish(LicenseStatusChanged(license_key=key, new_status=new_status))
        return f"Key {code(key)} status updated to {code(new_status)}."


class ResetSessionHandler:
    """Handler for the reset_session command."""

    def __init__(self, repository: LicenseRecordRepository, event_bus: EventBus):
        """Initialize handler with repository and event bus."""
        self.repository = repository
        self.event_bus = event_bus

    async def handle(self, key: str) -> str:
        """
        Clear the session binding so the next validation succeeds.

        Args:
            key: License key

        Returns:
            Reply text
        """
        if not await self.repository.reset_session(key):
            return _not_found(key)
        await self.event_bus.publish(LicenseSessionReset(license_key=key))
        return f"Session for key {code(key)} has been reset."


class DeleteLicenseHandler:
    """Handler for the delete command."""

    def __init__(self, repository: LicenseRecordRepository, event_bus: EventBus):
        """Initialize handler with repository and event bus."""
        self.repository = repository
        self.event_bus = event_bus

    async def handle(self, key: str) -> str:
        """
        Permanently delete a license key.

        Args:
            key: License key

        Returns:
            Reply text
        """
        if not await self.repository.delete(key):
            return _not_found(key)
        await self.event_bus.publish(LicenseDeleted(license_key=key))
        return f"Key {code(key)} has been deleted."
