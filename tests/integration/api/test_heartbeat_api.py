"""
Integration tests for the heartbeat endpoint.
"""
from datetime import timedelta

import pytest
from django.urls import reverse
from django.utils import timezone

from licenses.infrastructure.models import LicenseRecord


@pytest.mark.django_db
@pytest.mark.integration
class TestHeartbeatAPI:
    """Integration tests for POST /heartbeat."""

    def test_routes(self):
        """Test both the bare and the /api/ paths are served."""
        assert reverse("licenses:heartbeat") == "/heartbeat"
        assert reverse("licenses-api:heartbeat") == "/api/heartbeat"

    def test_refreshes_last_seen(self, api_client, container, db_license):
        """Test heartbeat refreshes recency without touching the binding."""
        seen = timezone.now() - timedelta(minutes=30)
        db_license(key="K", status="inactive", bound_address="9.9.9.9", last_seen_at=seen)

        response = api_client.post(reverse("licenses:heartbeat"), {"licenseKey": "K"}, format="json")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        record = LicenseRecord.objects.get(key="K")
        assert record.last_seen_at > seen
        assert record.bound_address == "9.9.9.9"
        assert record.status == "inactive"

    def test_unknown_key_acknowledged(self, api_client, container):
        """Test heartbeat for an unknown key still succeeds."""
        response = api_client.post(
            reverse("licenses-api:heartbeat"), {"licenseKey": "missing"}, format="json"
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}

    def test_missing_key(self, api_client, container):
        """Test a missing key is a 400."""
        response = api_client.post(reverse("licenses:heartbeat"), {}, format="json")
        assert response.status_code == 400
        assert response.json()["message"] == "License key is required."
