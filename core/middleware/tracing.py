"""
Tracing middleware for OpenTelemetry.

Opens a server span for each request.
"""

from typing import Callable

from django.http import HttpRequest, HttpResponse
from opentelemetry.trace import SpanKind, Status, StatusCode

from core.instrumentation import get_tracer

tracer = get_tracer(__name__)


class TracingMiddleware:
    """
    Middleware to add distributed tracing to requests.

    Request bodies are never recorded since they carry license keys.
    The trace ID is stored on ``request.trace_id`` for log correlation.
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process request with tracing."""
        with tracer.start_as_current_span(
            f"{request.method} {request.path}", kind=SpanKind.SERVER
        ) as span:
            span.set_attribute("http.method", request.method)
            span.set_attribute("http.target", request.path)
            span.set_attribute("client.address", getattr(request, "client_address", ""))

            context = span.get_span_context()
            if context.is_valid:
                request.trace_id = format(context.trace_id, "032x")  # type: ignore

            response = self.get_response(request)

            span.set_attribute("http.status_code", response.status_code)
            if response.status_code >= 500:
                span.set_status(Status(StatusCode.ERROR, f"HTTP {response.status_code}"))
            return response
