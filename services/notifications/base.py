"""
Notification building blocks.

A ``Notification`` describes *what* to tell a recipient and on which
channels (``via``). Each channel asks the notification for its own message
representation, e.g. ``to_mail`` for email. ``MailMessage`` is the email
representation: a subject, a greeting, lines of text around an optional
call-to-action button, and a salutation, rendered through the
``notifications/email.txt`` and ``notifications/email.html`` templates.

Example:
    class Welcome(Notification):
        def to_mail(self, notifiable):
            return (
                MailMessage()
                .subject("Welcome!")
                .line("Thanks for signing up.")
                .action("Open the app", absolute_url("/"))
            )
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from django.conf import settings
from django.template.loader import render_to_string

from services.core.exceptions import ConfigurationError


def absolute_url(path: str = "/") -> str:
    """Build an absolute URL for ``path`` on APP_BASE_URL."""
    base_url = getattr(settings, "APP_BASE_URL", "")
    if not base_url:
        raise ConfigurationError("APP_BASE_URL", "APP_BASE_URL is required to build links")
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


@dataclass(frozen=True)
class MailAction:
    text: str
    url: str


class MailMessage:
    """Fluent builder for notification emails."""

    text_template = "notifications/email.txt"
    html_template = "notifications/email.html"

    def __init__(self) -> None:
        self.subject_line: str | None = None
        self.greeting_line: str | None = None
        self.salutation_line: str | None = None
        self.intro_lines: list[str] = []
        self.outro_lines: list[str] = []
        self.call_to_action: MailAction | None = None

    def subject(self, text: str) -> MailMessage:
        self.subject_line = text
        return self

    def greeting(self, text: str) -> MailMessage:
        self.greeting_line = text
        return self

    def line(self, text: Any) -> MailMessage:
        """Add a paragraph; lines added after ``action`` go below the button."""
        target = self.outro_lines if self.call_to_action else self.intro_lines
        target.append(str(text))
        return self

    def action(self, text: str, url: str) -> MailMessage:
        self.call_to_action = MailAction(text=text, url=url)
        return self

    def salutation(self, text: str) -> MailMessage:
        self.salutation_line = text
        return self

    def get_context(self) -> dict:
        app_name = getattr(settings, "APP_NAME", "Chirper")
        return {
            "app_name": app_name,
            "subject": self.subject_line or "",
            "greeting": self.greeting_line or "Hello!",
            "intro_lines": self.intro_lines,
            "action": self.call_to_action,
            "outro_lines": self.outro_lines,
            "salutation": self.salutation_line or f"Regards,\n{app_name}",
        }

    def render(self) -> tuple[str, str]:
        """Render the message, returning ``(text_body, html_body)``."""
        context = self.get_context()
        text_body = render_to_string(self.text_template, context)
        html_body = render_to_string(self.html_template, context)
        return text_body.strip() + "\n", html_body


class Notification:
    """
    Base class for notifications.

    Subclasses override ``via`` to pick channels and provide one ``to_<channel>``
    method per channel they use.
    """

    def via(self, notifiable) -> list[str]:
        return ["mail"]

    def to_mail(self, notifiable) -> MailMessage:
        raise NotImplementedError(f"{type(self).__name__} does not support the mail channel")

    def default_subject(self) -> str:
        """Subject used when ``to_mail`` sets none: the class name split into words."""
        return re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", type(self).__name__)

    def to_dict(self) -> dict:
        return {"type": type(self).__name__}
