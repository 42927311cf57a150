"""
Settings module for Chirper.

This module should not set DJANGO_SETTINGS_MODULE directly as that's
handled by manage.py, asgi.py and the Celery app.
"""

# Settings are loaded through explicit module paths:
# - chirper.settings.development
# - chirper.settings.production
# - chirper.settings.staging
# - chirper.settings.test
