"""
Observability middleware.

This middleware adds structured request logging, Prometheus request
metrics and a correlation ID per request.
"""

import logging
import time
import uuid
from typing import Callable

from django.http import HttpRequest, HttpResponse

from core import metrics

logger = logging.getLogger(__name__)


class ObservabilityMiddleware:
    """
    Per-request correlation ID, start/finish log lines and HTTP metrics.

    An incoming ``X-Correlation-ID`` is reused so callers can follow a
    request across services; otherwise a new one is generated. Both the
    ID and the duration are echoed in response headers.
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request and add observability.

        Args:
            request: HTTP request

        Returns:
            HTTP response with observability headers
        """
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        request.correlation_id = correlation_id  # type: ignore

        start_time = time.time()
        logger.info(
            "Request started",
            extra={
                "correlation_id": correlation_id,
                "method": request.method,
                "path": request.path,
                "client_address": getattr(request, "client_address", None),
                "trace_id": getattr(request, "trace_id", None),
                "user_agent": request.META.get("HTTP_USER_AGENT", ""),
            },
        )

        try:
            response = self.get_response(request)
        except Exception as e:
            self._handle_exception(request, e, start_time, correlation_id)
            raise

        duration = time.time() - start_time
        endpoint = self._endpoint(request)
        metrics.http_requests_total.labels(
            method=request.method, endpoint=endpoint, status_code=str(response.status_code)
        ).inc()
        metrics.http_request_duration_seconds.labels(
            method=request.method, endpoint=endpoint
        ).observe(duration)

        self._log_response(request, response, correlation_id, duration)
        response["X-Correlation-ID"] = correlation_id
        response["X-Request-Duration"] = f"{duration:.3f}"
        return response

    @staticmethod
    def _endpoint(request: HttpRequest) -> str:
        """Route name for metric labels, so keys in paths never become labels."""
        match = getattr(request, "resolver_match", None)
        if match and match.view_name:
            return match.view_name
        return "unmatched"

    def _log_response(self, request, response, correlation_id, duration):
        """Log structured response information."""
        log_extra = {
            "correlation_id": correlation_id,
            "method": request.method,
            "path": request.path,
            "status_code": response.status_code,
            "duration_ms": round(duration * 1000, 2),
        }
        if response.status_code >= 500:
            logger.error("Request completed with server error", extra=log_extra)
        elif response.status_code >= 400:
            logger.warning("Request completed with client error", extra=log_extra)
        else:
            logger.info("Request completed successfully", extra=log_extra)

    def _handle_exception(self, request, e, start_time, correlation_id):
        """Log a request that raised."""
        duration = time.time() - start_time
        logger.error(
            "Request failed",
            extra={
                "correlation_id": correlation_id,
                "method": request.method,
                "path": request.path,
                "error": str(e),
                "error_type": type(e).__name__,
                "duration_ms": round(duration * 1000, 2),
            },
            exc_info=True,
        )
