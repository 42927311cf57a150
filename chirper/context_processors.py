"""Context processors for Chirper."""

from django.conf import settings


def app_environment(request):
    """Expose the application name and DEBUG flag to templates."""
    return {"APP_NAME": settings.APP_NAME, "APP_DEBUG": settings.DEBUG}


def mail_capture(request):
    """Link the local mail-capture inbox while debugging."""
    if not settings.DEBUG:
        return {"MAIL_CAPTURE_URL": None}
    return {"MAIL_CAPTURE_URL": getattr(settings, "MAIL_CAPTURE_URL", None)}
