"""
Unit tests for the in-memory event bus and standard event handlers.
"""
import pytest

from bindings.domain.events import HeartbeatReceived, SessionBound, ValidationRejected
from core import metrics
from core.domain.events import DomainEvent, EventHandler
from core.infrastructure.event_handlers import MetricsEventHandler, register_event_handlers
from core.infrastructure.events import InMemoryEventBus
from licenses.domain.events import LicenseCreated, LicenseStatusChanged


class _Recorder(EventHandler):
    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


class _Failing(EventHandler):
    async def handle(self, event):
        raise RuntimeError("boom")


def _sample(counter, **labels):
    return counter.labels(**labels)._value.get()


class TestInMemoryEventBus:
    """Tests for InMemoryEventBus."""

    @pytest.mark.asyncio
    async def test_base_class_subscription_receives_subclasses(self):
        """Test subscribing to DomainEvent receives everything."""
        bus = InMemoryEventBus()
        recorder = _Recorder()
        bus.subscribe(DomainEvent, recorder)
        await bus.publish(LicenseCreated(license_key="K"))
        await bus.publish(SessionBound(license_key="K", address="1.2.3.4"))
        assert [e.event_type for e in recorder.events] == ["LicenseCreated", "SessionBound"]

    @pytest.mark.asyncio
    async def test_specific_subscription(self):
        """Test subscribers only get matching events."""
        bus = InMemoryEventBus()
        recorder = _Recorder()
        bus.subscribe(LicenseCreated, recorder)
        await bus.publish(SessionBound(license_key="K"))
        assert recorder.events == []

    @pytest.mark.asyncio
    async def test_failing_handler_isolated(self):
        """Test a failing handler does not affect others or the publisher."""
        bus = InMemoryEventBus()
        recorder = _Recorder()
        bus.subscribe(DomainEvent, _Failing())
        bus.subscribe(DomainEvent, recorder)
        await bus.publish(LicenseCreated(license_key="K"))
        assert len(recorder.events) == 1

    @pytest.mark.asyncio
    async def test_publish_without_handlers(self):
        """Test publishing with no subscribers is a no-op."""
        await InMemoryEventBus().publish(LicenseCreated(license_key="K"))


class TestDomainEvents:
    """Tests for event serialization."""

    def test_to_dict_includes_payload(self):
        """Test payload carries event-specific attributes."""
        data = LicenseStatusChanged(license_key="K", new_status="inactive").to_dict()
        assert data["event_type"] == "LicenseStatusChanged"
        assert data["aggregate_id"] == "K"
        assert data["payload"] == {"new_status": "inactive"}

    def test_rejection_outcome(self):
        """Test rejection events carry their reason as outcome."""
        event = ValidationRejected(license_key="K", address="1.2.3.4", reason="inactive")
        assert event.outcome == "inactive"
        assert event.payload()["reason"] == "inactive"


class TestMetricsEventHandler:
    """Tests for MetricsEventHandler."""

    @pytest.mark.asyncio
    async def test_counts_validation_outcomes(self):
        """Test validation outcomes are counted."""
        before = _sample(metrics.license_validations_total, outcome="valid")
        await MetricsEventHandler().handle(SessionBound(license_key="K"))
        assert _sample(metrics.license_validations_total, outcome="valid") == before + 1

    @pytest.mark.asyncio
    async def test_counts_heartbeats(self):
        """Test heartbeats are counted by result."""
        before = _sample(metrics.license_heartbeats_total, result="ignored")
        await MetricsEventHandler().handle(HeartbeatReceived(license_key="K", touched=False))
        assert _sample(metrics.license_heartbeats_total, result="ignored") == before + 1

    def test_register_event_handlers(self):
        """Test the standard handlers are wired to every event."""
        bus = register_event_handlers(InMemoryEventBus())
        assert len(bus.handlers_for(LicenseCreated)) == 2
