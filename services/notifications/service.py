"""
Service for sending notifications to users.
"""

from collections.abc import Iterable

from asgiref.sync import sync_to_async

from services.core.exceptions import (
    MissingRecipientError,
    NotificationError,
    NotificationDeliveryError,
    UnsupportedChannelError,
)
from services.core.logging import get_logger
from services.notifications.base import Notification
from services.notifications.email import EmailService

logger = get_logger(__name__)


class NotificationService:
    """
    Routes notifications to recipients over the channels each notification asks for.

    A recipient ("notifiable") is any object with a ``pk``; the mail channel also
    needs an ``email`` attribute.

    Example:
        service = NotificationService()
        service.notify(user, NewChirp(chirp))
    """

    def __init__(self, email_service: EmailService | None = None) -> None:
        self.email_service = email_service or EmailService()
        self.channels = {
            "mail": self._send_mail_notification,
        }

    def notify(self, notifiable, notification: Notification) -> dict[str, bool]:
        """
        Send a notification to one recipient on every channel it asks for.

        Returns:
            dict: channel name -> True if that channel delivered

        Raises:
            UnsupportedChannelError: if via() names an unknown channel
            MissingRecipientError: if the recipient has no address for a channel
            NotificationDeliveryError: if a channel gave up after its retries
        """
        results = {}
        for channel in notification.via(notifiable):
            sender = self.channels.get(channel)
            if sender is None:
                raise UnsupportedChannelError(channel=channel, supported=tuple(self.channels))
            results[channel] = sender(notifiable, notification)
        return results

    async def anotify(self, notifiable, notification: Notification) -> dict[str, bool]:
        """Async version of notify."""
        return await sync_to_async(self.notify)(notifiable, notification)

    def notify_many(self, notifiables: Iterable, notification: Notification) -> dict:
        """
        Send the same notification to each recipient of an iterable.

        The iterable is consumed lazily, one recipient at a time, so a database
        cursor can be passed in without loading every row. A recipient whose
        notification cannot be routed is logged and counted as failed; other
        errors propagate.

        Returns:
            Dict with 'recipients', 'sent' and 'failed' counts
        """
        results = {"recipients": 0, "sent": 0, "failed": 0}

        for notifiable in notifiables:
            results["recipients"] += 1
            try:
                delivered = self.notify(notifiable, notification)
            except NotificationError as e:
                logger.warning(f"Skipping recipient {getattr(notifiable, 'pk', None)}: {e}")
                results["failed"] += 1
                continue

            if delivered and all(delivered.values()):
                results["sent"] += 1
            else:
                results["failed"] += 1

        return results

    def _send_mail_notification(self, notifiable, notification: Notification) -> bool:
        """Render the notification's mail representation and send it."""
        recipient = getattr(notifiable, "email", None)
        if not recipient:
            raise MissingRecipientError(notifiable=notifiable, channel="mail")

        message = notification.to_mail(notifiable)
        text_body, html_body = message.render()
        subject = message.subject_line or notification.default_subject()

        sent = self.email_service.send_email(
            subject=subject,
            body=text_body,
            html_body=html_body,
            recipient=recipient,
            fail_silently=True,
        )

        if not sent:
            logger.error(f"User {notifiable.pk}: Failed to send {type(notification).__name__} mail")
            raise NotificationDeliveryError(channel="mail", recipient=recipient)

        logger.debug(f"User {notifiable.pk}: {type(notification).__name__} mail sent")
        return True
