"""
API exception handlers.

This module maps domain errors raised by the handlers to HTTP responses.
Every error body has the client-facing shape
``{"valid": false, "message": ...}`` and carries the domain message verbatim.
"""

import logging
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    DomainException,
    InvalidRequestError,
    LicenseInactiveError,
    LicenseNotFoundError,
    PersistenceError,
    SessionConflictError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."

DOMAIN_STATUS_CODES = {
    InvalidRequestError: status.HTTP_400_BAD_REQUEST,
    LicenseNotFoundError: status.HTTP_404_NOT_FOUND,
    LicenseInactiveError: status.HTTP_403_FORBIDDEN,
    SessionConflictError: status.HTTP_403_FORBIDDEN,
    PersistenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(message: str, status_code: int) -> Response:
    """Build the standard error body."""
    return Response({"valid": False, "message": message}, status=status_code)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    correlation_id = _get_correlation_id(context)

    if isinstance(exc, DomainException):
        return _handle_domain_exception(exc, correlation_id)

    if isinstance(exc, APIException):
        response = exception_handler(exc, context)
        if response is not None:
            detail = response.data.get("detail", exc.default_detail) if isinstance(
                response.data, dict
            ) else exc.default_detail
            response.data = {"valid": False, "message": str(detail)}
            return response

    return _handle_unexpected_exception(exc, correlation_id)


def _get_correlation_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract correlation ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "correlation_id", None)


def _handle_domain_exception(exc: DomainException, correlation_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = DOMAIN_STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    if status_code >= 500:
        logger.error(
            "Domain exception: %s - %s",
            exc.code,
            exc.message,
            extra={"correlation_id": correlation_id},
        )
        return error_response(INTERNAL_ERROR_MESSAGE, status_code)

    logger.warning(
        "Domain exception: %s - %s", exc.code, exc.message, extra={"correlation_id": correlation_id}
    )
    return error_response(exc.message, status_code)


def _handle_unexpected_exception(exc: Exception, correlation_id: Optional[str]) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error(
        "Unexpected error: %s", exc, extra={"correlation_id": correlation_id}, exc_info=True
    )
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
