"""
URL configuration for LicenseServer project.
"""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from core.views import HealthDBView, HealthView, MetricsView, RootView

client_patterns = ("api.v1.licenses.urls", "licenses")

urlpatterns = [
    path("", RootView.as_view(), name="root"),
    # Health check endpoints
    path("health/", HealthView.as_view(), name="health"),
    path("health/db/", HealthDBView.as_view(), name="health-db"),
    path("metrics", MetricsView.as_view(), name="metrics"),
    # Client API
    path("", include(client_patterns, namespace="licenses")),
    path("api/", include(client_patterns, namespace="licenses-api")),
    # Admin channel
    path("api/", include(("api.v1.admin.urls", "admin"), namespace="admin")),
    # OpenAPI Schema
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
]
