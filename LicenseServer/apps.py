"""
App configuration for License Server.
"""
import logging

from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from core.instrumentation import setup_tracing

logger = logging.getLogger(__name__)


class LicenseServerConfig(AppConfig):
    """App configuration for LicenseServer."""

    name = "LicenseServer"
    verbose_name = "License Server"

    def ready(self):
        """Check license settings and configure tracing when Django starts."""
        timeout = settings.LICENSE_SESSION_TIMEOUT
        if timeout.total_seconds() <= 0:
            raise ImproperlyConfigured("LICENSE_SESSION_TIMEOUT must be positive")
        if not settings.LICENSE_ADMIN_IDENTITY:
            logger.warning("TELEGRAM_ADMIN_CHAT_ID is not set; all admin commands will be rejected")
        if not settings.TELEGRAM_BOT_TOKEN:
            logger.warning("TELEGRAM_BOT_TOKEN is not set; admin replies cannot be delivered")
        logger.info("Session timeout is %s", timeout)

        setup_tracing(
            settings.OTEL_SERVICE_NAME,
            settings.OTEL_EXPORTER_OTLP_ENDPOINT,
            environment=settings.ENVIRONMENT,
        )
