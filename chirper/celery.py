"""
Celery application for Chirper.

Workers consume the ``notifications`` queue, where new-Chirp notification
jobs are routed (see CELERY_TASK_ROUTES). Start one with:

    celery -A chirper worker -Q notifications,celery -l info
"""

import os
from logging.config import dictConfig

from celery import Celery
from celery.signals import setup_logging


def resolve_settings_module() -> str:
    """Settings module for the current ENVIRONMENT (production, staging or development)."""
    env = os.environ.get("ENVIRONMENT")
    if env in ("production", "staging"):
        return f"chirper.settings.{env}"
    return "chirper.settings.development"


# Bare "chirper.settings" is a package, not a settings module
if os.environ.get("DJANGO_SETTINGS_MODULE") in (None, "", "chirper.settings"):
    os.environ["DJANGO_SETTINGS_MODULE"] = resolve_settings_module()

app = Celery("chirper")
app.config_from_object("django.conf:settings", namespace="CELERY")

app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    result_expires=3600,
    task_track_started=True,
    # A job is acknowledged once it finished, so a lost worker re-delivers it
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    worker_prefetch_multiplier=1,
)

app.autodiscover_tasks()


@setup_logging.connect
def config_loggers(*args, **kwargs):
    """Workers log through the same handlers and redaction filter as the web process."""
    from django.conf import settings  # noqa: PLC0415

    dictConfig(settings.LOGGING)
