"""Notifications sent about Chirps."""

from django.conf import settings
from django.urls import reverse

from services.core.utils.text_utils import limit_chars
from services.notifications import MailMessage, Notification, absolute_url


class NewChirp(Notification):
    """Tells a user that someone else posted a Chirp."""

    def __init__(self, chirp) -> None:
        self.chirp = chirp

    def via(self, notifiable) -> list[str]:
        return ["mail"]

    def to_mail(self, notifiable) -> MailMessage:
        author = self.chirp.user.display_name
        excerpt = limit_chars(self.chirp.message, settings.CHIRP_NOTIFICATION_EXCERPT_LENGTH)

        return (
            MailMessage()
            .subject(f"New Chirp from {author}")
            .greeting(f"New Chirp from {author}")
            .line(excerpt)
            .action("Go to Chirper", absolute_url(reverse("chirps:index")))
            .line("Thank you for using our application!")
        )

    def to_dict(self) -> dict:
        return {
            "type": type(self).__name__,
            "chirp_id": self.chirp.pk,
            "author_id": self.chirp.user_id,
        }
