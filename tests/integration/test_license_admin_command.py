"""
Integration tests for the license_admin management command.
"""
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

from licenses.infrastructure.models import LicenseRecord


def _run(*words):
    out = StringIO()
    call_command("license_admin", *words, stdout=out)
    return out.getvalue().strip()


@pytest.mark.django_db
@pytest.mark.integration
class TestLicenseAdminCommand:
    """Tests for the CLI admin channel."""

    def test_create_and_list(self, container):
        """Test creating a key and listing it."""
        reply = _run("create")
        key = LicenseRecord.objects.get().key
        assert key in reply
        assert f"Key: `{key}`" in _run("list")

    def test_status_and_reset(self, container, db_license, t0):
        """Test status and reset_session through the CLI."""
        db_license(key="K", bound_address="1.2.3.4", last_seen_at=t0)
        assert _run("status", "K", "inactive") == "Key `K` status updated to `inactive`."
        assert _run("reset_session", "K") == "Session for key `K` has been reset."
        record = LicenseRecord.objects.get(key="K")
        assert record.status == "inactive"
        assert record.bound_address is None

    def test_delete_missing(self, container):
        """Test deleting a missing key."""
        assert _run("delete", "nope") == "Key `nope` not found."

    @override_settings(LICENSE_ADMIN_IDENTITY="")
    def test_requires_admin_identity(self, container):
        """Test the CLI refuses to run without a configured identity."""
        with pytest.raises(CommandError):
            _run("list")
