"""
Client address middleware.

Resolves the network origin of each request and stores it on
``request.client_address`` for the session binding checks.
"""

import logging
from typing import Callable

from django.conf import settings
from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


def resolve_client_address(request: HttpRequest, trust_proxy: bool) -> str:
    """
    Determine the client address of a request.

    With ``trust_proxy`` the first hop of ``X-Forwarded-For`` wins,
    since the service normally runs behind a hosting proxy.

    Args:
        request: HTTP request
        trust_proxy: Whether to honour ``X-Forwarded-For``

    Returns:
        Client address string (may be empty if unknown)
    """
    if trust_proxy:
        forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    return request.META.get("REMOTE_ADDR", "") or ""


class ClientAddressMiddleware:
    """Attach ``client_address`` to every request."""

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.client_address = resolve_client_address(  # type: ignore
            request, settings.LICENSE_TRUST_PROXY
        )
        return self.get_response(request)
