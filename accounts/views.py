from __future__ import annotations

from django.conf import settings
from django.contrib import messages
from django.contrib.auth import get_user_model, login
from django.contrib.auth import views as auth_views
from django.db import connection
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.urls import reverse, reverse_lazy
from django.views.generic import CreateView

import redis

from services.core.logging import get_logger

from .forms import EmailAuthenticationForm, EmailUserCreationForm

User = get_user_model()
logger = get_logger(__name__)


class LoginView(auth_views.LoginView):
    template_name = "accounts/login.html"
    authentication_form = EmailAuthenticationForm
    redirect_authenticated_user = True

    def get_success_url(self) -> str:
        # ?next= wins; otherwise straight to the Chirp feed
        return self.get_redirect_url() or reverse("chirps:index")


class LogoutView(auth_views.LogoutView):
    """Django only accepts POST here, so a stray link cannot log anyone out."""

    next_page = reverse_lazy("home")

    def post(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        messages.success(request, "You have been logged out successfully.")
        return super().post(request, *args, **kwargs)


class RegisterView(CreateView):
    model = User
    form_class = EmailUserCreationForm
    template_name = "accounts/register.html"
    success_url = reverse_lazy("chirps:index")

    def form_valid(self, form) -> HttpResponse:
        response = super().form_valid(form)
        login(self.request, self.object, backend="django.contrib.auth.backends.ModelBackend")
        logger.info(f"User {self.object.pk}: registered")
        messages.success(self.request, f"Welcome to {settings.APP_NAME}!")
        return response


def health_check(request: HttpRequest) -> HttpResponse:
    """
    Readiness probe: the database, and the Redis instance that carries the
    notification queue.
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        redis.from_url(getattr(settings, "REDIS_URL", "redis://localhost:6379/0")).ping()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return JsonResponse({"status": "unhealthy", "error": str(e)}, status=503)

    return JsonResponse({"status": "healthy"})


def health_check_simple(request: HttpRequest) -> HttpResponse:
    """Liveness probe; touches nothing."""
    return JsonResponse({"status": "ok"})
