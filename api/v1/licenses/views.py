"""
Client API views.

These endpoints are used by licensed installations to:
- Validate a license key and claim its session
- Send heartbeats while running
"""

from asgiref.sync import async_to_sync
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.licenses.serializers import (
    ErrorResponseSerializer,
    HeartbeatRequestSerializer,
    HeartbeatResponseSerializer,
    ValidateLicenseRequestSerializer,
    ValidateLicenseResponseSerializer,
)
from bindings.application.commands.record_heartbeat import RecordHeartbeatCommand
from bindings.application.commands.validate_license import ValidateLicenseCommand
from core.domain.exceptions import InvalidRequestError
from LicenseServer.container import get_container

LICENSE_KEY_REQUIRED = "License key is required."


def _license_key_from(serializer) -> str:
    """Validate the request body and return the key, or raise InvalidRequestError."""
    if not serializer.is_valid():
        raise InvalidRequestError(LICENSE_KEY_REQUIRED)
    license_key = (serializer.validated_data.get("licenseKey") or "").strip()
    if not license_key:
        raise InvalidRequestError(LICENSE_KEY_REQUIRED)
    return license_key


class ValidateLicenseView(APIView):
    """View for validating license keys."""

    @extend_schema(
        operation_id="validate_license",
        summary="Validate License",
        description=(
            "Validate a license key and bind its session to the caller's network "
            "address. A key whose session is live on another address is rejected "
            "until that session has been inactive for the session timeout."
        ),
        tags=["Client API"],
        request=ValidateLicenseRequestSerializer,
        responses={
            200: ValidateLicenseResponseSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
            500: ErrorResponseSerializer,
        },
    )
    def post(self, request: Request) -> Response:
        """Validate a license key."""
        return async_to_sync(self._handle_validate)(request)

    async def _handle_validate(self, request: Request) -> Response:
        """Async handler for validate."""
        license_key = _license_key_from(ValidateLicenseRequestSerializer(data=request.data))
        command = ValidateLicenseCommand(
            license_key=license_key,
            address=getattr(request, "client_address", "") or request.META.get("REMOTE_ADDR", ""),
            now=timezone.now(),
        )
        result = await get_container().validate_handler.handle(command)
        return Response({"valid": result.valid}, status=status.HTTP_200_OK)


class HeartbeatView(APIView):
    """View for client heartbeats."""

    @extend_schema(
        operation_id="heartbeat",
        summary="Heartbeat",
        description=(
            "Refresh the session activity time of a license key. Best effort: "
            "unknown keys are acknowledged too. Does not validate the key."
        ),
        tags=["Client API"],
        request=HeartbeatRequestSerializer,
        responses={
            200: HeartbeatResponseSerializer,
            400: ErrorResponseSerializer,
        },
    )
    def post(self, request: Request) -> Response:
        """Record a heartbeat."""
        return async_to_sync(self._handle_heartbeat)(request)

    async def _handle_heartbeat(self, request: Request) -> Response:
        """Async handler for heartbeat."""
        license_key = _license_key_from(HeartbeatRequestSerializer(data=request.data))
        command = RecordHeartbeatCommand(license_key=license_key, now=timezone.now())
        result = await get_container().heartbeat_handler.handle(command)
        return Response({"success": result.success}, status=status.HTTP_200_OK)
