"""
Pytest configuration and shared fixtures.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest

from administration.application.dispatcher import AdminCommandDispatcher
from administration.ports.admin_notifier import AdminNotifier
from bindings.domain.services import SessionBindingEngine
from core.domain.events import DomainEvent, EventBus, EventHandler
from core.domain.exceptions import DuplicateLicenseKeyError, PersistenceError
from core.infrastructure.events import InMemoryEventBus
from LicenseServer.container import ServiceContainer, set_container
from licenses.domain.license_record import LicenseRecord
from licenses.infrastructure.repositories.django_license_record_repository import (
    DjangoLicenseRecordRepository,
)
from licenses.ports.license_record_repository import LicenseRecordRepository

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
ADMIN_IDENTITY = "4242"


class InMemoryLicenseRecordRepository(LicenseRecordRepository):
    """Dict-backed record store for unit tests."""

    def __init__(self):
        self.records: Dict[str, LicenseRecord] = {}
        self.fail_with: Optional[Exception] = None
        self.writes: List[str] = []

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _replace(self, key: str, name: str, **fields) -> bool:
        self._check()
        record = self.records.get(key)
        if record is None:
            return False
        self.records[key] = replace(record, **fields)
        self.writes.append(name)
        return True

    async def find_by_key(self, key: str) -> Optional[LicenseRecord]:
        self._check()
        return self.records.get(key)

    async def add(self, record: LicenseRecord) -> LicenseRecord:
        self._check()
        if record.key in self.records:
            raise DuplicateLicenseKeyError()
        self.records[record.key] = record
        self.writes.append("add")
        return record

    async def list_all(self) -> List[LicenseRecord]:
        self._check()
        return sorted(self.records.values(), key=lambda r: r.created_at, reverse=True)

    async def update_binding(self, key: str, address: str, seen_at: datetime) -> bool:
        return self._replace(key, "update_binding", bound_address=address, last_seen_at=seen_at)

    async def touch(self, key: str, seen_at: datetime) -> bool:
        return self._replace(key, "touch", last_seen_at=seen_at)

    async def update_status(self, key: str, status: str) -> bool:
        return self._replace(key, "update_status", status=status)

    async def reset_session(self, key: str) -> bool:
        return self._replace(key, "reset_session", bound_address=None, last_seen_at=None)

    async def delete(self, key: str) -> bool:
        self._check()
        self.writes.append("delete")
        return self.records.pop(key, None) is not None


class RecordingEventHandler(EventHandler):
    """Collects every published event."""

    def __init__(self):
        self.events: List[DomainEvent] = []

    async def handle(self, event: DomainEvent) -> None:
        self.events.append(event)

    def types(self) -> List[str]:
        return [event.event_type for event in self.events]


class RecordingNotifier(AdminNotifier):
    """Collects admin replies instead of sending them."""

    def __init__(self):
        self.sent = []
        self.markdown = []

    async def send_message(self, recipient: str, text: str, markdown: bool = True) -> None:
        self.sent.append((recipient, text))
        self.markdown.append(markdown)


@pytest.fixture
def t0():
    """Fixed reference time."""
    return T0


@pytest.fixture
def memory_repository():
    """Fixture for an in-memory LicenseRecordRepository."""
    return InMemoryLicenseRecordRepository()


@pytest.fixture
def license_record_repository():
    """Fixture for the Django LicenseRecordRepository."""
    return DjangoLicenseRecordRepository()


@pytest.fixture
def recorded_events():
    """Fixture for an event recorder."""
    return RecordingEventHandler()


@pytest.fixture
def event_bus(recorded_events) -> EventBus:
    """Fixture for an in-memory event bus that records every event."""
    bus = InMemoryEventBus()
    bus.subscribe(DomainEvent, recorded_events)
    return bus


@pytest.fixture
def engine(memory_repository):
    """Fixture for a SessionBindingEngine with a 60 minute timeout."""
    return SessionBindingEngine(memory_repository, timedelta(minutes=60))


@pytest.fixture
def dispatcher(memory_repository, event_bus, t0):
    """Fixture for an AdminCommandDispatcher over the in-memory store."""
    return AdminCommandDispatcher(
        repository=memory_repository,
        event_bus=event_bus,
        authorized_identity=ADMIN_IDENTITY,
        session_timeout=timedelta(minutes=60),
        now_fn=lambda: t0,
    )


@pytest.fixture
def notifier():
    """Fixture for a recording admin notifier."""
    return RecordingNotifier()


@pytest.fixture
def container(db, license_record_repository, notifier):
    """Fixture installing a service container backed by the test database."""
    built = ServiceContainer.build(license_record_repository, notifier=notifier)
    set_container(built)
    return built


@pytest.fixture(autouse=True)
def reset_container():
    """Make sure no container leaks between tests."""
    yield
    set_container(None)


@pytest.fixture
def db_license(db):
    """Factory fixture saving license records to the database."""
    from licenses.infrastructure.models import LicenseRecord as LicenseRecordModel

    def create(key="key-1", status="active", bound_address=None, last_seen_at=None):
        return LicenseRecordModel.objects.create(
            key=key,
            status=status,
            bound_address=bound_address,
            last_seen_at=last_seen_at,
            created_at=T0,
        )

    return create


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
