"""
Event handlers for domain events.

These handlers produce the side effects of license activity:
an audit trail in the structured log and Prometheus counters.
"""

import logging

from core import metrics
from core.domain.events import DomainEvent, EventBus, EventHandler

logger = logging.getLogger(__name__)


class AuditLogEventHandler(EventHandler):
    """Writes every domain event to the audit logger."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "occurred_at": event.occurred_at.isoformat(),
                "payload": event.payload(),
            },
        )


class MetricsEventHandler(EventHandler):
    """Counts validation outcomes and heartbeats."""

    async def handle(self, event: DomainEvent) -> None:
        outcome = getattr(event, "outcome", None)
        if event.event_type == "HeartbeatReceived":
            result = "touched" if event.touched else "ignored"
            metrics.license_heartbeats_total.labels(result=result).inc()
        elif outcome:
            metrics.license_validations_total.labels(outcome=outcome).inc()


def register_event_handlers(bus: EventBus) -> EventBus:
    """
    Subscribe the standard handlers to a bus.

    Args:
        bus: Event bus to wire

    Returns:
        The same bus, for chaining
    """
    bus.subscribe(DomainEvent, AuditLogEventHandler())
    bus.subscribe(DomainEvent, MetricsEventHandler())
    logger.info("Event handlers registered")
    return bus
