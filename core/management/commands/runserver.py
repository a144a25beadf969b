"""
runserver that listens on the configured service port by default.
"""
from django.conf import settings
from django.core.management.commands.runserver import Command as BaseRunserverCommand


class Command(BaseRunserverCommand):
    """Development server bound to SERVICE_PORT unless an address is given."""

    @property
    def default_port(self):
        return str(settings.SERVICE_PORT)
