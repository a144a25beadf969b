"""
Test settings for LicenseServer.
"""

from datetime import timedelta

from .base import *  # noqa: F403, F401

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

# Use in-memory SQLite for tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

LICENSE_SESSION_TIMEOUT = timedelta(minutes=60)
LICENSE_TRUST_PROXY = True
TELEGRAM_BOT_TOKEN = "123456:test-token"
LICENSE_ADMIN_IDENTITY = "4242"

# Disable logging during tests
LOGGING_CONFIG = None

# Spans stay in-process
OTEL_EXPORTER_OTLP_ENDPOINT = ""
