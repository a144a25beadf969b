"""
Django management command for license administration.

Runs admin commands from a shell, e.g.::

    python manage.py license_admin create
    python manage.py license_admin status <key> inactive
    python manage.py license_admin reset_session <key>

The command acts as the configured admin identity.
"""

from asgiref.sync import async_to_sync
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from LicenseServer.container import get_container


class Command(BaseCommand):
    """Command to run an admin command against the license store."""

    help = "Run a license admin command (create, list, status, reset_session, delete)"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "words",
            nargs="+",
            help="Admin command and its arguments, e.g. 'status <key> inactive'",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        identity = settings.LICENSE_ADMIN_IDENTITY
        if not identity:
            raise CommandError("TELEGRAM_ADMIN_CHAT_ID is not configured")

        text = " ".join(options["words"])
        reply = async_to_sync(get_container().dispatcher.dispatch)(identity, text)
        self.stdout.write(reply.text)
