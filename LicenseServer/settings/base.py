"""
Base Django settings for LicenseServer.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py.
Deployment values are read from the process environment.
"""
import os
import urllib.parse
from datetime import timedelta
from pathlib import Path

from .logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    "SECRET_KEY", "django-insecure-3v#k2@l0c4l-only-7q!n8x$z1m^w5r&t9y(e)u6i*o-p4a"
)

ALLOWED_HOSTS = ["*"]


def env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def database_from_url(url: str) -> dict:
    """
    Build a DATABASES entry from a URL.

    Supports ``postgres://``/``postgresql://`` and ``sqlite:///path``.

    Args:
        url: Database URL

    Returns:
        Django database configuration dictionary
    """
    parsed = urllib.parse.urlparse(url)
    if parsed.scheme == "sqlite":
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": parsed.path[1:] if parsed.path.startswith("/") else parsed.path,
        }
    if parsed.scheme in ("postgres", "postgresql"):
        return {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": parsed.path[1:] if parsed.path.startswith("/") else parsed.path,
            "USER": urllib.parse.unquote(parsed.username or "postgres"),
            "PASSWORD": urllib.parse.unquote(parsed.password or ""),
            "HOST": parsed.hostname or "localhost",
            "PORT": parsed.port or 5432,
            "OPTIONS": {
                "connect_timeout": 10,
            },
        }
    raise ValueError(f"Unsupported DATABASE_URL scheme: {parsed.scheme}")


# Application definition
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    # Third party
    "corsheaders",
    "rest_framework",
    "drf_spectacular",
    # Local apps
    "LicenseServer.apps.LicenseServerConfig",
    "core",
    "licenses",
    "bindings",
    "administration",
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
    # Custom middleware
    "core.middleware.client_address.ClientAddressMiddleware",
    "core.middleware.tracing.TracingMiddleware",
    "core.middleware.observability.ObservabilityMiddleware",
]

ROOT_URLCONF = "LicenseServer.urls"

TEMPLATES = []

WSGI_APPLICATION = "LicenseServer.wsgi.application"
ASGI_APPLICATION = "LicenseServer.asgi.application"

# Database
# https://docs.djangoproject.com/en/4.2/ref/settings/#databases
DATABASES = {
    "default": database_from_url(
        os.environ.get("DATABASE_URL", f"sqlite:///{BASE_DIR / 'licenses.sqlite3'}")
    )
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# REST Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "api.exceptions.custom_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# drf-spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "License Server API",
    "DESCRIPTION": (
        "License key validation with single-session binding per key. "
        "Clients validate and send heartbeats; operators administer keys "
        "through the Telegram bot webhook."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "TAGS": [
        {"name": "Client API", "description": "License validation and heartbeats"},
        {"name": "Admin", "description": "Operator command channel"},
        {"name": "Health", "description": "Health check endpoints"},
    ],
}

# Service
SERVICE_PORT = int(os.environ.get("PORT", "3001"))

# License sessions
LICENSE_SESSION_TIMEOUT = timedelta(
    minutes=int(os.environ.get("LICENSE_SESSION_TIMEOUT_MINUTES", "60"))
)
# Honour X-Forwarded-For from a fronting proxy when resolving client addresses.
# Only enable behind a proxy that overwrites the header.
LICENSE_TRUST_PROXY = env_bool("LICENSE_TRUST_PROXY", False)

# Admin channel
TELEGRAM_BOT_TOKEN = os.environ.get("TELEGRAM_BOT_TOKEN", "")
LICENSE_ADMIN_IDENTITY = os.environ.get("TELEGRAM_ADMIN_CHAT_ID", "")
# Optional secret Telegram echoes in X-Telegram-Bot-Api-Secret-Token
TELEGRAM_WEBHOOK_SECRET = os.environ.get("TELEGRAM_WEBHOOK_SECRET", "")

# Observability
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
OTEL_SERVICE_NAME = os.environ.get("OTEL_SERVICE_NAME", "license-server")
# Empty disables span export
OTEL_EXPORTER_OTLP_ENDPOINT = os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT", "")
LOGGING = get_logging_config(ENVIRONMENT)

# CORS: browser clients call the client API cross-origin.
# Comma-separated origins; unset allows any origin.
CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ALLOWED_ORIGINS", "").split(",")
    if origin.strip()
]
CORS_ALLOW_ALL_ORIGINS = not CORS_ALLOWED_ORIGINS
