"""
Serializers for client-facing license endpoints.
"""

from rest_framework import serializers


class ValidateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for validate request. Extra client fields are ignored."""

    licenseKey = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )


class ValidateLicenseResponseSerializer(serializers.Serializer):
    """Serializer for a successful validation."""

    valid = serializers.BooleanField()


class HeartbeatRequestSerializer(serializers.Serializer):
    """Serializer for heartbeat request."""

    licenseKey = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )


class HeartbeatResponseSerializer(serializers.Serializer):
    """Serializer for heartbeat acknowledgement."""

    success = serializers.BooleanField()


class ErrorResponseSerializer(serializers.Serializer):
    """Serializer for error bodies."""

    valid = serializers.BooleanField()
    message = serializers.CharField()
