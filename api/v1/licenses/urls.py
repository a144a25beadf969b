"""
URL configuration for client license endpoints.
"""

from django.urls import path

from api.v1.licenses import views

urlpatterns = [
    path(
        "validate",
        views.ValidateLicenseView.as_view(),
        name="validate-license",
    ),
    path(
        "heartbeat",
        views.HeartbeatView.as_view(),
        name="heartbeat",
    ),
]
