"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import ipaddress
from abc import ABC
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


class LicenseStatus(Enum):
    """
    Well-known license statuses.

    Operators may assign any other string; only ACTIVE permits validation.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value

    @classmethod
    def permits_validation(cls, status: str) -> bool:
        """Return True if the raw status string allows a key to validate."""
        return status == cls.ACTIVE.value


@dataclass(frozen=True)
class NetworkAddress(ValueObject):
    """
    Network origin of a client.

    IP literals are normalized (so ``::ffff:1.2.3.4`` and ``1.2.3.4``
    compare equal); anything else is kept verbatim.
    """

    value: str

    def __post_init__(self):
        """Validate and normalize the address."""
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Network address cannot be empty")
        if len(self.value) > 64:
            raise ValueError("Network address too long")
        object.__setattr__(self, "value", self._normalize(self.value.strip()))

    @staticmethod
    def _normalize(raw: str) -> str:
        try:
            address = ipaddress.ip_address(raw)
        except ValueError:
            return raw
        if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped:
            return str(address.ipv4_mapped)
        return str(address)

    def __str__(self) -> str:
        """Return address as string."""
        return self.value
