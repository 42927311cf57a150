"""
Development settings for Chirper.

SQLite, a local Redis for the queue and the live feed, and SMTP to a local
Mailpit so notification emails can be read at MAIL_CAPTURE_URL:

    docker run -p 1025:1025 -p 8025:8025 axllent/mailpit
    celery -A chirper worker -Q notifications,celery -l info
    python manage.py runserver
"""

import contextlib
import logging.config
import os
import sys

from .base import *  # noqa: F403

SECRET_KEY = os.environ.get("SECRET_KEY", "django-insecure-chirper-development-only")
DEBUG = os.environ.get("DEBUG", "True").lower() in ("true", "1", "yes", "on")

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("ALLOWED_HOSTS", "127.0.0.1,localhost").split(",")
    if host.strip()
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
    }
}

# ================================================================================
# REDIS: CACHE, QUEUE AND CHANNEL LAYER
# ================================================================================

REDIS_URL = os.environ.get("REDIS_URL", "redis://127.0.0.1:6379/1")

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": REDIS_URL,
        "KEY_PREFIX": "chirper_cache",
    }
}

CELERY_BROKER_URL = os.environ.get("CELERY_BROKER_URL", "redis://127.0.0.1:6379/2")
CELERY_RESULT_BACKEND = os.environ.get("CELERY_RESULT_BACKEND", "redis://127.0.0.1:6379/3")

# Set to "true" to send notifications inside the request when no worker runs
CELERY_TASK_ALWAYS_EAGER = (
    os.environ.get("CELERY_TASK_ALWAYS_EAGER", "false").lower() in ("true", "1", "yes", "on")
)

CHANNEL_LAYERS = {
    "default": {
        "BACKEND": "channels_redis.core.RedisChannelLayer",
        "CONFIG": {"hosts": [REDIS_URL]},
    },
}

# ================================================================================
# MAIL (Mailpit: SMTP on 1025, web UI on 8025)
# ================================================================================

EMAIL_BACKEND = os.environ.get("EMAIL_BACKEND", "django.core.mail.backends.smtp.EmailBackend")
EMAIL_HOST = os.environ.get("EMAIL_HOST", "127.0.0.1")
EMAIL_PORT = int(os.environ.get("EMAIL_PORT", "1025"))
EMAIL_USE_TLS = False
EMAIL_TIMEOUT = 10

# ================================================================================
# LOGGING
# ================================================================================

from services.core.logging import get_development_logging  # noqa: E402

LOGGING = get_development_logging()
logging.config.dictConfig(LOGGING)

with contextlib.suppress(ImportError):
    import django_extensions  # noqa: F401

    INSTALLED_APPS.append("django_extensions")  # noqa: F405

# Only the serving process, not the autoreloader
if "runserver" in sys.argv and os.environ.get("RUN_MAIN") == "true":
    print(f"Database: {DATABASES['default']['NAME']}")
    print(f"Redis: {REDIS_URL}")
    print(f"Mail: smtp://{EMAIL_HOST}:{EMAIL_PORT}, inbox at {MAIL_CAPTURE_URL}")  # noqa: F405
