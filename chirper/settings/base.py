"""
Base settings for Chirper application.

This contains common configuration shared between development and production.
"""

import os
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# ================================================================================
# CORE APPLICATION SETTINGS
# ================================================================================

APP_NAME = os.environ.get("APP_NAME", "Chirper")
APP_BASE_URL = os.environ.get("APP_BASE_URL", "http://localhost:8000")

# ================================================================================
# APPLICATION DEFINITION
# ================================================================================

INSTALLED_APPS = [
    "daphne",  # Must be FIRST for runserver ASGI integration
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django.contrib.humanize",
    # Third-party apps
    "channels",
    # Local apps
    "accounts",
    "chirps",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "chirper.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "chirper.context_processors.app_environment",
                "chirper.context_processors.mail_capture",
            ],
        },
    },
]

WSGI_APPLICATION = "chirper.wsgi.application"
ASGI_APPLICATION = "chirper.asgi.application"

# ================================================================================
# AUTHENTICATION AND AUTHORIZATION
# ================================================================================

AUTH_USER_MODEL = "accounts.User"
LOGIN_URL = "accounts:login"
LOGIN_REDIRECT_URL = "chirps:index"
LOGOUT_REDIRECT_URL = "home"

# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": ("django.contrib.auth.password_validation.UserAttributeSimilarityValidator"),
    },
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
        "OPTIONS": {
            "min_length": 8,
        },
    },
    {
        "NAME": "django.contrib.auth.password_validation.CommonPasswordValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.NumericPasswordValidator",
    },
]

# ================================================================================
# INTERNATIONALIZATION
# ================================================================================

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ================================================================================
# DEFAULT PRIMARY KEY FIELD TYPE
# ================================================================================

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ================================================================================
# STATIC FILES (CSS, JavaScript, Images)
# ================================================================================

STATIC_URL = "/static/"

# ================================================================================
# EMAIL
# ================================================================================

DEFAULT_FROM_EMAIL = os.environ.get("DEFAULT_FROM_EMAIL", "Chirper <hello@example.com>")

# Local mail-capture web UI (Mailpit); only linked from pages while debugging
MAIL_CAPTURE_URL = os.environ.get("MAIL_CAPTURE_URL", "http://localhost:8025")

# ================================================================================
# CHIRPS
# ================================================================================

CHIRP_NOTIFICATION_EXCERPT_LENGTH = 50

# Rows fetched per round trip while streaming notification recipients
NOTIFICATION_CURSOR_CHUNK_SIZE = int(os.environ.get("NOTIFICATION_CURSOR_CHUNK_SIZE", "500"))

CHIRPS_FEED_GROUP = "chirps_feed"

# ================================================================================
# DEFAULT CELERY SETTINGS (will be overridden in production)
# ================================================================================

CELERY_TASK_SERIALIZER = "json"
CELERY_ACCEPT_CONTENT = ["json"]
CELERY_RESULT_SERIALIZER = "json"
CELERY_TIMEZONE = "UTC"
CELERY_ENABLE_UTC = True

CELERY_TASK_ROUTES = {
    "chirps.tasks.*": {"queue": "notifications"},
}
