"""
ValidateLicenseHandler.

Handler for validating a license key and binding its session.
"""

import logging

from bindings.application.commands.validate_license import ValidateLicenseCommand
from bindings.application.dto.binding_dto import ValidationResultDTO
from bindings.domain.events import SessionBound, SessionConflictRejected, ValidationRejected
from bindings.domain.services import SessionBindingEngine
from core.domain.events import EventBus
from core.instrumentation import get_tracer
from core.domain.exceptions import (
    InvalidRequestError,
    LicenseInactiveError,
    LicenseNotFoundError,
    PersistenceError,
    SessionConflictError,
)

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

_REJECTION_REASONS = {
    InvalidRequestError: "invalid_request",
    LicenseNotFoundError: "not_found",
    LicenseInactiveError: "inactive",
    PersistenceError: "persistence_error",
}


class ValidateLicenseHandler:
    """Handler for ValidateLicenseCommand."""

    def __init__(self, engine: SessionBindingEngine, event_bus: EventBus):
        """Initialize handler with the engine and event bus."""
        self.engine = engine
        self.event_bus = event_bus

    async def handle(self, command: ValidateLicenseCommand) -> ValidationResultDTO:
        """
        Handle validate license command.

        Args:
            command: ValidateLicenseCommand

        Returns:
            ValidationResultDTO for the bound session

        Raises:
            InvalidRequestError: If the key is missing
            LicenseNotFoundError: If the key is unknown
            LicenseInactiveError: If the key is disabled
            SessionConflictError: If another address holds a live session
            PersistenceError: If the store fails
        """
        with tracer.start_as_current_span("license.validate") as span:
            span.set_attribute("client.address", command.address or "")
            return await self._validate(command, span)

    async def _validate(self, command: ValidateLicenseCommand, span) -> ValidationResultDTO:
        key = command.license_key
        try:
            record = await self.engine.validate(key, command.address, command.now)
        except SessionConflictError:
            span.set_attribute("license.outcome", "session_conflict")
            logger.warning(
                "Session conflict for key %s... from %s", (key or "")[:8], command.address
            )
            await self.event_bus.publish(
                SessionConflictRejected(license_key=key, address=command.address)
            )
            raise
        except tuple(_REJECTION_REASONS) as e:
            reason = _REJECTION_REASONS[type(e)]
            span.set_attribute("license.outcome", reason)
            log = logger.error if isinstance(e, PersistenceError) else logger.warning
            log("Validation failed for key %s...: %s", (key or "")[:8], e.message)
            await self.event_bus.publish(
                ValidationRejected(license_key=key or "", address=command.address, reason=reason)
            )
            raise

        span.set_attribute("license.outcome", "valid")
        logger.info("Validation successful for key %s... from %s", key[:8], record.bound_address)
        await self.event_bus.publish(
            SessionBound(license_key=record.key, address=record.bound_address)
        )
        return ValidationResultDTO(
            valid=True,
            license_key=record.key,
            bound_address=record.bound_address,
            last_seen_at=record.last_seen_at,
        )
