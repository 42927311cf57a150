"""
Django system checks for Chirper.

Validates the settings that notification emails depend on, so a broken link
or sender address is caught at startup rather than in a worker.
"""

from urllib.parse import urlparse

from django.conf import settings
from django.core.checks import Error, Warning, register


@register()
def check_app_base_url(app_configs, **kwargs):
    """APP_BASE_URL must be absolute: it is the target of every email call-to-action."""
    errors = []
    base_url = getattr(settings, "APP_BASE_URL", "") or ""
    parsed = urlparse(base_url)

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        errors.append(
            Error(
                f"APP_BASE_URL must be an absolute http(s) URL (current value: '{base_url}')",
                hint="Set APP_BASE_URL, e.g. 'https://chirper.example.com'.",
                id="chirper.E001",
            )
        )
    elif base_url.endswith("/"):
        errors.append(
            Warning(
                "APP_BASE_URL should not end with a slash",
                hint=f"Use '{base_url.rstrip('/')}' instead.",
                id="chirper.W001",
            )
        )

    return errors


@register()
def check_default_from_email(app_configs, **kwargs):
    """Notification mail needs a sender address."""
    if not getattr(settings, "DEFAULT_FROM_EMAIL", ""):
        return [
            Error(
                "DEFAULT_FROM_EMAIL is not set",
                hint="Set DEFAULT_FROM_EMAIL, e.g. 'Chirper <hello@example.com>'.",
                id="chirper.E002",
            )
        ]
    return []
