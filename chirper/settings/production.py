"""
Production settings for Chirper.

Every secret and endpoint comes from the environment; a missing one stops the
process at import time instead of surfacing later in a worker.
"""

import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

from services.core.logging import build_logging

from .base import *  # noqa: F403


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("true", "1", "yes", "on")


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ImproperlyConfigured(f"{name} must be set in production")
    return value


# ================================================================================
# SECURITY
# ================================================================================

SECRET_KEY = _require_env("SECRET_KEY")
DEBUG = False

# localhost stays allowed for container health checks
ALLOWED_HOSTS = [
    host.strip() for host in os.environ.get("ALLOWED_HOSTS", "").split(",") if host.strip()
] + ["localhost", "127.0.0.1"]
CSRF_TRUSTED_ORIGINS = [
    f"https://{host}" for host in ALLOWED_HOSTS if host not in ("localhost", "127.0.0.1")
]

CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = _env_flag("SECURE_SSL_REDIRECT", "true")
SECURE_HSTS_SECONDS = int(os.environ.get("SECURE_HSTS_SECONDS", "31536000"))
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

CONTAINER_MODE = _env_flag("CONTAINER_MODE", "false")

# Links in notification emails point here
APP_BASE_URL = _require_env("APP_BASE_URL")

# ================================================================================
# DATABASE
# ================================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.environ.get("DB_NAME", "chirper"),
        "USER": os.environ.get("DB_USER", "chirper"),
        "PASSWORD": _require_env("DB_PASSWORD"),
        "HOST": os.environ.get("DB_HOST", "localhost"),
        "PORT": os.environ.get("DB_PORT", "5432"),
        "OPTIONS": {
            "sslmode": "disable" if CONTAINER_MODE else "require",
            "connect_timeout": 10,
        },
        "CONN_MAX_AGE": 60,
    }
}

# ================================================================================
# REDIS: CACHE, QUEUE AND CHANNEL LAYER
# ================================================================================

REDIS_URL = _require_env("REDIS_URL")

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": REDIS_URL,
        "KEY_PREFIX": "chirper_cache",
        "TIMEOUT": 300,
    }
}

CELERY_BROKER_URL = _require_env("CELERY_BROKER_URL")
CELERY_RESULT_BACKEND = _require_env("CELERY_RESULT_BACKEND")
CELERY_TASK_ALWAYS_EAGER = False
CELERY_WORKER_PREFETCH_MULTIPLIER = 1
CELERY_WORKER_MAX_TASKS_PER_CHILD = 100

CHANNEL_LAYERS = {
    "default": {
        "BACKEND": "channels_redis.core.RedisChannelLayer",
        "CONFIG": {
            "hosts": [os.environ.get("CHANNELS_REDIS_URL", REDIS_URL)],
            "capacity": 1500,
            "expiry": 10,
        },
    },
}

STATIC_ROOT = BASE_DIR / "staticfiles"  # noqa: F405

# ================================================================================
# LOGGING
# ================================================================================

# Containers log to stdout only; hosts also keep rotating files
LOGGING = build_logging(
    log_dir=None if CONTAINER_MODE else Path(os.environ.get("LOG_DIR", "/var/log/chirper")),
    level="INFO",
    console_format="console_plain" if CONTAINER_MODE else "console_dev",
    max_mb=50,
    backups=10,
    mail_admins=True,
)

# ================================================================================
# EMAIL
# ================================================================================

EMAIL_BACKEND = "django.core.mail.backends.smtp.EmailBackend"
EMAIL_HOST = os.environ.get("EMAIL_HOST", "smtp.example.com")
EMAIL_PORT = int(os.environ.get("EMAIL_PORT", "587"))
EMAIL_USE_TLS = _env_flag("EMAIL_USE_TLS", "true")
EMAIL_HOST_USER = os.environ.get("EMAIL_HOST_USER", "")
EMAIL_HOST_PASSWORD = os.environ.get("EMAIL_HOST_PASSWORD", "")
EMAIL_TIMEOUT = 30

ADMINS = [("Chirper Admin", os.environ.get("ADMIN_EMAIL", "admin@example.com"))]
SERVER_EMAIL = os.environ.get("SERVER_EMAIL", "errors@example.com")
