"""
Admin command vocabulary and parser.

Operators type commands such as ``/status <key> <newStatus>`` into the
bot chat or pass them to the CLI. Parsing turns that text into an
``AdminCommand`` plus its arguments.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from core.domain.exceptions import UnknownAdminCommandError


class AdminCommand(Enum):
    """Administrative commands."""

    CREATE = "create"
    LIST = "list"
    STATUS = "status"
    RESET_SESSION = "reset_session"
    DELETE = "delete"

    def __str__(self) -> str:
        """Return command name as string."""
        return self.value


# (minimum, maximum) positional arguments; None means unbounded
_ARITY = {
    AdminCommand.CREATE: (0, None),
    AdminCommand.LIST: (0, None),
    AdminCommand.STATUS: (2, None),
    AdminCommand.RESET_SESSION: (1, 1),
    AdminCommand.DELETE: (1, 1),
}

USAGE = {
    AdminCommand.CREATE: "/create",
    AdminCommand.LIST: "/list",
    AdminCommand.STATUS: "/status <key> <newStatus>",
    AdminCommand.RESET_SESSION: "/reset_session <key>",
    AdminCommand.DELETE: "/delete <key>",
}


@dataclass(frozen=True)
class ParsedAdminCommand:
    """A recognized command and its arguments."""

    command: AdminCommand
    args: Tuple[str, ...]


def parse_admin_command(text: str) -> ParsedAdminCommand:
    """
    Parse operator input into a command.

    The leading slash is optional and a Telegram ``@botname`` suffix on
    the command word is ignored, as are trailing words after ``create``
    and ``list``. For ``status`` everything after the key
    is the new status, so statuses may contain spaces.

    Args:
        text: Raw command text

    Returns:
        ParsedAdminCommand

    Raises:
        UnknownAdminCommandError: If the text is not a known command
            or has the wrong number of arguments
    """
    tokens = (text or "").split()
    if not tokens:
        raise UnknownAdminCommandError()

    name = tokens[0].lstrip("/").split("@", 1)[0].lower()
    try:
        command = AdminCommand(name)
    except ValueError as e:
        raise UnknownAdminCommandError() from e

    args = tokens[1:]
    minimum, maximum = _ARITY[command]
    if len(args) < minimum or (maximum is not None and len(args) > maximum):
        raise UnknownAdminCommandError(f"Unknown command. Usage: {USAGE[command]}")

    if command in (AdminCommand.CREATE, AdminCommand.LIST):
        args = []
    elif command is AdminCommand.STATUS:
        args = [args[0], " ".join(args[1:])]
    return ParsedAdminCommand(command=command, args=tuple(args))
