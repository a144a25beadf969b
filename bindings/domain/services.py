"""
Session binding domain service.

At most one network address may hold a license key at a time. A holder
keeps the key while it keeps validating or sending heartbeats; once it
has been silent for the session timeout, any address may claim the key.
No explicit release is needed.

The read in ``validate`` and the write that follows are not atomic.
Two addresses racing for an unheld key can both pass the liveness
check, and the later write wins the binding.
"""

import logging
from datetime import datetime, timedelta

from core.domain.exceptions import (
    InvalidRequestError,
    LicenseInactiveError,
    LicenseNotFoundError,
    PersistenceError,
    SessionConflictError,
)
from core.domain.value_objects import NetworkAddress
from licenses.domain.license_record import LicenseRecord
from licenses.ports.license_record_repository import LicenseRecordRepository

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TIMEOUT = timedelta(minutes=60)


class SessionBindingEngine:
    """Decides whether a validation succeeds, rebinds, or is rejected."""

    def __init__(
        self,
        repository: LicenseRecordRepository,
        session_timeout: timedelta = DEFAULT_SESSION_TIMEOUT,
    ):
        """
        Initialize the engine.

        Args:
            repository: License record store
            session_timeout: Inactivity window that keeps a session live
        """
        if session_timeout <= timedelta(0):
            raise ValueError("Session timeout must be positive")
        self.repository = repository
        self.session_timeout = session_timeout

    @staticmethod
    def _require_key(key: str) -> str:
        if key is None or not str(key).strip():
            raise InvalidRequestError("License key is required.")
        return str(key).strip()

    async def validate(self, key: str, address: str, now: datetime) -> LicenseRecord:
        """
        Validate a key for a client address and (re)bind the session.

        Args:
            key: License key
            address: Observed network origin of the caller
            now: Current time

        Returns:
            The record as bound after this call

        Raises:
            InvalidRequestError: If key or address is missing
            LicenseNotFoundError: If the key is unknown
            LicenseInactiveError: If the status is not active
            SessionConflictError: If a live session is bound to another address
            PersistenceError: If the store read or write fails
        """
        key = self._require_key(key)
        try:
            address = str(NetworkAddress(address or ""))
        except ValueError as e:
            raise InvalidRequestError(f"Client address is required: {e}") from e

        record = await self.repository.find_by_key(key)
        if record is None:
            raise LicenseNotFoundError()

        if not record.is_active():
            raise LicenseInactiveError(record.status)

        if record.is_session_live(now, self.session_timeout) and record.bound_address != address:
            # Rejection leaves the record untouched.
            raise SessionConflictError()

        updated = await self.repository.update_binding(key, address, now)
        if not updated:
            # Deleted between the read and the write.
            raise LicenseNotFoundError()

        return record.bind(address, now)

    async def heartbeat(self, key: str, now: datetime) -> bool:
        """
        Refresh session recency for a key, best effort.

        Status and address are not checked, and a missing key is not an
        error. This must not stand in for ``validate``.

        Args:
            key: License key
            now: Current time

        Returns:
            True if a record was refreshed

        Raises:
            InvalidRequestError: If the key is missing
        """
        key = self._require_key(key)
        try:
            return await self.repository.touch(key, now)
        except PersistenceError as e:
            logger.warning("Heartbeat for %s... not recorded: %s", key[:8], e.message)
            return False
