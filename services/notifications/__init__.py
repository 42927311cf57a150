from .base import MailMessage, Notification, absolute_url
from .service import NotificationService

__all__ = ["MailMessage", "Notification", "NotificationService", "absolute_url"]
