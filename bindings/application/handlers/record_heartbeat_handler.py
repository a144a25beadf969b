"""
RecordHeartbeatHandler.

Handler for client heartbeats.
"""

from bindings.application.commands.record_heartbeat import RecordHeartbeatCommand
from bindings.application.dto.binding_dto import HeartbeatResultDTO
from bindings.domain.events import HeartbeatReceived
from bindings.domain.services import SessionBindingEngine
from core.domain.events import EventBus


class RecordHeartbeatHandler:
    """Handler for RecordHeartbeatCommand."""

    def __init__(self, engine: SessionBindingEngine, event_bus: EventBus):
        """Initialize handler with the engine and event bus."""
        self.engine = engine
        self.event_bus = event_bus

    async def handle(self, command: RecordHeartbeatCommand) -> HeartbeatResultDTO:
        """
        Handle record heartbeat command.

        The heartbeat is acknowledged whether or not the key exists.

        Args:
            command: RecordHeartbeatCommand

        Returns:
            HeartbeatResultDTO

        Raises:
            InvalidRequestError: If the key is missing
        """
        touched = await self.engine.heartbeat(command.license_key, command.now)
        await self.event_bus.publish(
            HeartbeatReceived(license_key=command.license_key, touched=touched)
        )
        return HeartbeatResultDTO(success=True, touched=touched)
