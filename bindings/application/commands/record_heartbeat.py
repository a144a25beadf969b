"""
RecordHeartbeatCommand.

Command to refresh session recency for a license key.
"""
from dataclasses import dataclass
from datetime import datetime


@dataclass
class RecordHeartbeatCommand:
    """Command to record a client heartbeat."""

    license_key: str
    now: datetime
