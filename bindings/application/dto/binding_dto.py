"""
Binding DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import datetime


@dataclass
class ValidationResultDTO:
    """DTO for a successful validation."""

    valid: bool
    license_key: str
    bound_address: str
    last_seen_at: datetime


@dataclass
class HeartbeatResultDTO:
    """DTO for a heartbeat acknowledgement."""

    success: bool
    touched: bool
