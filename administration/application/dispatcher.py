"""
AdminCommandDispatcher.

Routes operator text to the handler for its command after checking the
caller against the single authorized identity.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional

from administration.application.handlers.license_admin_handlers import (
    CreateLicenseHandler,
    DeleteLicenseHandler,
    ListLicensesHandler,
    ResetSessionHandler,
    SetLicenseStatusHandler,
)
from administration.domain.commands import AdminCommand, parse_admin_command
from administration.domain.replies import AdminReply
from core import metrics
from core.domain.events import EventBus
from core.domain.exceptions import (
    DomainException,
    UnauthorizedAdminError,
    UnknownAdminCommandError,
)
from licenses.ports.license_record_repository import LicenseRecordRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AdminCommandDispatcher:
    """
    Dispatches admin commands to their handlers.

    Failures never propagate to the channel: every outcome, including
    rejection and store errors, becomes reply text for the operator.
    """

    def __init__(
        self,
        repository: LicenseRecordRepository,
        event_bus: EventBus,
        authorized_identity: Optional[str],
        session_timeout: timedelta,
        now_fn: Callable[[], datetime] = _utcnow,
    ):
        """
        Initialize the dispatcher and its dispatch table.

        Args:
            repository: License record store
            event_bus: Event bus for lifecycle events
            authorized_identity: The only identity allowed to issue commands;
                empty or None authorizes nobody
            session_timeout: Used to show whether listed sessions are live
            now_fn: Clock
        """
        self.authorized_identity = str(authorized_identity).strip() if authorized_identity else ""
        self.handlers: Dict[AdminCommand, Callable] = {
            AdminCommand.CREATE: CreateLicenseHandler(repository, event_bus, now_fn).handle,
            AdminCommand.LIST: ListLicensesHandler(repository, session_timeout, now_fn).handle,
            AdminCommand.STATUS: SetLicenseStatusHandler(repository, event_bus).handle,
            AdminCommand.RESET_SESSION: ResetSessionHandler(repository, event_bus).handle,
            AdminCommand.DELETE: DeleteLicenseHandler(repository, event_bus).handle,
        }

    def authorize(self, identity) -> None:
        """
        Check a caller identity.

        Args:
            identity: Caller identity (chat ID, CLI operator)

        Raises:
            UnauthorizedAdminError: If the identity is not the authorized one
        """
        if not self.authorized_identity or str(identity).strip() != self.authorized_identity:
            raise UnauthorizedAdminError()

    async def dispatch(self, identity, text: str) -> AdminReply:
        """
        Execute an admin command on behalf of ``identity``.

        Args:
            identity: Caller identity
            text: Raw command text

        Returns:
            Reply for the caller; rejections and errors are plain text
        """
        try:
            self.authorize(identity)
        except UnauthorizedAdminError as e:
            logger.warning("Rejected admin command from unauthorized identity %s", identity)
            metrics.admin_commands_total.labels(command="-", result="unauthorized").inc()
            return AdminReply(e.message, markdown=False)

        try:
            parsed = parse_admin_command(text)
        except UnknownAdminCommandError as e:
            metrics.admin_commands_total.labels(command="-", result="unknown").inc()
            return AdminReply(e.message, markdown=False)

        handler = self.handlers[parsed.command]
        try:
            reply = await handler(*parsed.args)
        except DomainException as e:
            logger.error("Admin command %s failed: %s", parsed.command, e.message)
            metrics.admin_commands_total.labels(command=str(parsed.command), result="error").inc()
            return AdminReply(f"Error: {e.message}", markdown=False)

        logger.info("Admin command %s executed", parsed.command)
        metrics.admin_commands_total.labels(command=str(parsed.command), result="ok").inc()
        return AdminReply(reply)
