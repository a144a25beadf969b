"""
Unit tests for client address resolution.
"""
from django.test import RequestFactory

from core.middleware.client_address import resolve_client_address


class TestResolveClientAddress:
    """Tests for resolve_client_address."""

    def setup_method(self):
        self.factory = RequestFactory()

    def test_forwarded_first_hop_when_trusted(self):
        """Test the first X-Forwarded-For hop wins behind a trusted proxy."""
        request = self.factory.get("/", HTTP_X_FORWARDED_FOR="1.2.3.4, 10.0.0.1")
        assert resolve_client_address(request, trust_proxy=True) == "1.2.3.4"

    def test_remote_addr_when_untrusted(self):
        """Test the forwarded header is ignored without trust."""
        request = self.factory.get("/", HTTP_X_FORWARDED_FOR="1.2.3.4", REMOTE_ADDR="5.6.7.8")
        assert resolve_client_address(request, trust_proxy=False) == "5.6.7.8"

    def test_remote_addr_without_header(self):
        """Test fallback to the peer address."""
        request = self.factory.get("/", REMOTE_ADDR="5.6.7.8")
        assert resolve_client_address(request, trust_proxy=True) == "5.6.7.8"

    def test_blank_header_falls_back(self):
        """Test an empty forwarded header falls back."""
        request = self.factory.get("/", HTTP_X_FORWARDED_FOR=" ", REMOTE_ADDR="5.6.7.8")
        assert resolve_client_address(request, trust_proxy=True) == "5.6.7.8"
