"""URL configuration for chirper project."""

from django.contrib import admin
from django.urls import include, path
from django.views.generic import TemplateView

from accounts.views import health_check, health_check_simple

urlpatterns = [
    path("admin/", admin.site.urls),
    path("accounts/", include("accounts.urls")),
    path("chirps/", include("chirps.urls")),
    # Note: WebSocket routing for the live feed is in asgi.py, not HTTP URLs
    path("", TemplateView.as_view(template_name="home.html"), name="home"),
    # Health check endpoints for container orchestration
    path("health/", health_check, name="health"),
    path("health/simple/", health_check_simple, name="health-simple"),
]
