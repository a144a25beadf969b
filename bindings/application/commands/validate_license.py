"""
ValidateLicenseCommand.

Command to validate a license key for a client address.
"""
from dataclasses import dataclass
from datetime import datetime


@dataclass
class ValidateLicenseCommand:
    """Command to validate a license key and bind its session."""

    license_key: str
    address: str
    now: datetime
