"""
LicenseRecord repository port (interface).

This defines the contract for license record persistence operations.
Implementations are in the infrastructure layer.

Every method is a single point operation; implementations must raise
``PersistenceError`` for store-level faults and must not retry.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from licenses.domain.license_record import LicenseRecord


class LicenseRecordRepository(ABC):
    """
    Abstract repository for LicenseRecord entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def find_by_key(self, key: str) -> Optional[LicenseRecord]:
        """
        Find a license record by key.

        Args:
            key: License key

        Returns:
            LicenseRecord entity or None if not found
        """
        pass

    @abstractmethod
    async def add(self, record: LicenseRecord) -> LicenseRecord:
        """
        Insert a new license record.

        Args:
            record: LicenseRecord entity to insert

        Returns:
            Inserted license record

        Raises:
            DuplicateLicenseKeyError: If the key already exists
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[LicenseRecord]:
        """
        List every license record, newest first.

        Returns:
            List of LicenseRecord entities
        """
        pass

    @abstractmethod
    async def update_binding(self, key: str, address: str, seen_at: datetime) -> bool:
        """
        Bind a session: set bound address and last-seen time.

        Args:
            key: License key
            address: Client network address
            seen_at: Activity timestamp

        Returns:
            True if a record was updated, False if the key is absent
        """
        pass

    @abstractmethod
    async def touch(self, key: str, seen_at: datetime) -> bool:
        """
        Refresh last-seen time only.

        Args:
            key: License key
            seen_at: Activity timestamp

        Returns:
            True if a record was updated, False if the key is absent
        """
        pass

    @abstractmethod
    async def update_status(self, key: str, status: str) -> bool:
        """
        Change the status of a license record.

        Args:
            key: License key
            status: New status string

        Returns:
            True if a record was updated, False if the key is absent
        """
        pass

    @abstractmethod
    async def reset_session(self, key: str) -> bool:
        """
        Clear bound address and last-seen time.

        Args:
            key: License key

        Returns:
            True if a record was updated, False if the key is absent
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """
        Permanently delete a license record.

        Args:
            key: License key

        Returns:
            True if a record was deleted, False if the key is absent
        """
        pass
