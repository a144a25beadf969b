"""
Unit tests for tracing setup and middleware.
"""
from django.http import HttpResponse
from django.test import RequestFactory

from core.instrumentation import setup_tracing
from core.middleware.tracing import TracingMiddleware


class TestTracing:
    """Tests for tracing."""

    def test_no_endpoint_disables_export(self):
        """Test tracing export stays off without an endpoint."""
        assert setup_tracing("license-server", "") is False

    def test_middleware_passes_response_through(self):
        """Test the middleware is transparent to the response."""
        middleware = TracingMiddleware(lambda request: HttpResponse("ok", status=201))
        response = middleware(RequestFactory().post("/validate"))
        assert response.status_code == 201
        assert response.content == b"ok"
