"""
Service composition.

Builds the repository, event bus, engine, handlers and admin channel from
Django settings. One container is built per process on first use; tests
replace it with ``set_container``.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings

from administration.application.dispatcher import AdminCommandDispatcher
from administration.infrastructure.telegram_notifier import TelegramNotifier
from administration.ports.admin_notifier import AdminNotifier
from bindings.application.handlers.record_heartbeat_handler import RecordHeartbeatHandler
from bindings.application.handlers.validate_license_handler import ValidateLicenseHandler
from bindings.domain.services import SessionBindingEngine
from core.domain.events import EventBus
from core.infrastructure.event_handlers import register_event_handlers
from core.infrastructure.events import InMemoryEventBus
from licenses.infrastructure.repositories.django_license_record_repository import (
    DjangoLicenseRecordRepository,
)
from licenses.ports.license_record_repository import LicenseRecordRepository

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Process-scoped service dependencies."""

    repository: LicenseRecordRepository
    event_bus: EventBus
    engine: SessionBindingEngine
    validate_handler: ValidateLicenseHandler
    heartbeat_handler: RecordHeartbeatHandler
    dispatcher: AdminCommandDispatcher
    notifier: Optional[AdminNotifier]

    @classmethod
    def build(
        cls,
        repository: LicenseRecordRepository,
        notifier: Optional[AdminNotifier] = None,
        event_bus: Optional[EventBus] = None,
    ) -> "ServiceContainer":
        """
        Wire services around a repository using current settings.

        Args:
            repository: License record store
            notifier: Outbound admin channel, if any
            event_bus: Event bus (a new in-memory bus with the standard
                handlers if omitted)

        Returns:
            ServiceContainer
        """
        bus = event_bus or register_event_handlers(InMemoryEventBus())
        engine = SessionBindingEngine(repository, settings.LICENSE_SESSION_TIMEOUT)
        return cls(
            repository=repository,
            event_bus=bus,
            engine=engine,
            validate_handler=ValidateLicenseHandler(engine, bus),
            heartbeat_handler=RecordHeartbeatHandler(engine, bus),
            dispatcher=AdminCommandDispatcher(
                repository=repository,
                event_bus=bus,
                authorized_identity=settings.LICENSE_ADMIN_IDENTITY,
                session_timeout=settings.LICENSE_SESSION_TIMEOUT,
            ),
            notifier=notifier,
        )

    @classmethod
    def from_settings(cls) -> "ServiceContainer":
        """Build the production container (Django ORM store, Telegram replies)."""
        notifier = None
        if settings.TELEGRAM_BOT_TOKEN:
            notifier = TelegramNotifier(settings.TELEGRAM_BOT_TOKEN)
        return cls.build(DjangoLicenseRecordRepository(), notifier=notifier)


_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Return the process container, building it on first use."""
    global _container
    if _container is None:
        _container = ServiceContainer.from_settings()
        logger.info("Service container initialized")
    return _container


def set_container(container: Optional[ServiceContainer]) -> None:
    """Replace the process container (None rebuilds from settings on next use)."""
    global _container
    _container = container
