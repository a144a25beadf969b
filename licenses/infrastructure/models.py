"""
LicenseRecord Django ORM model.

This is the infrastructure layer model for license records.
Domain entities are in licenses.domain.license_record.
"""
from django.db import models


class LicenseRecord(models.Model):
    """
    A license key, its operator-assigned status and its current session.

    ``bound_address`` and ``last_seen_at`` are both null when no session
    has been recorded.
    """

    key = models.CharField(max_length=64, unique=True, db_index=True)
    status = models.CharField(max_length=32, default="active")
    bound_address = models.CharField(
        max_length=64,
        null=True,
        blank=True,
        help_text="Network address holding the current session",
    )
    last_seen_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Last successful validation or heartbeat",
    )
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "licenses"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="licenses_status_idx"),
        ]

    def __str__(self):
        return f"{self.key} ({self.status})"
