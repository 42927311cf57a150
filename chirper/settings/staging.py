"""
Staging environment settings.

Same as production, except that TLS ends at the proxy and outgoing mail is
captured instead of delivered, so new Chirps never email real people.
"""

import os

from .production import *  # noqa: F403
from .production import _env_flag

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = False

# Notification mail goes to the staging Mailpit container
EMAIL_HOST = os.environ.get("EMAIL_HOST", "mailpit")
EMAIL_PORT = int(os.environ.get("EMAIL_PORT", "1025"))
EMAIL_USE_TLS = _env_flag("EMAIL_USE_TLS", "false")
EMAIL_HOST_USER = os.environ.get("EMAIL_HOST_USER", "")
EMAIL_HOST_PASSWORD = os.environ.get("EMAIL_HOST_PASSWORD", "")
