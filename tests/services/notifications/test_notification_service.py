"""Tests for NotificationService channel routing and fan-out."""

from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from services.core.exceptions import (
    MissingRecipientError,
    NotificationDeliveryError,
    UnsupportedChannelError,
)
from services.notifications.base import MailMessage, Notification
from services.notifications.email import EmailService
from services.notifications.service import NotificationService


class Ping(Notification):
    def to_mail(self, notifiable):
        return MailMessage().subject("Ping").line(f"Hello {notifiable.email}")


class NoSubject(Notification):
    def to_mail(self, notifiable):
        return MailMessage().line("No subject set")


class Carrier(Notification):
    def via(self, notifiable):
        return ["pigeon"]


def recipient(pk, email):
    return SimpleNamespace(pk=pk, email=email)


class TestNotificationService:
    @pytest.fixture
    def email_service(self):
        service = Mock(spec=EmailService)
        service.send_email.return_value = True
        return service

    @pytest.fixture
    def service(self, email_service):
        return NotificationService(email_service=email_service)

    def test_notify_sends_mail(self, service, email_service):
        result = service.notify(recipient(1, "ada@example.com"), Ping())

        assert result == {"mail": True}
        email_service.send_email.assert_called_once()
        kwargs = email_service.send_email.call_args.kwargs
        assert kwargs["subject"] == "Ping"
        assert kwargs["recipient"] == "ada@example.com"
        assert kwargs["fail_silently"] is True
        assert "Hello ada@example.com" in kwargs["body"]
        assert "Hello ada@example.com" in kwargs["html_body"]

    def test_notify_falls_back_to_default_subject(self, service, email_service):
        service.notify(recipient(1, "ada@example.com"), NoSubject())

        assert email_service.send_email.call_args.kwargs["subject"] == "No Subject"

    def test_notify_unknown_channel_raises(self, service):
        with pytest.raises(UnsupportedChannelError) as exc_info:
            service.notify(recipient(1, "ada@example.com"), Carrier())

        assert exc_info.value.channel == "pigeon"
        assert exc_info.value.supported == ["mail"]

    def test_notify_without_email_raises(self, service, email_service):
        with pytest.raises(MissingRecipientError):
            service.notify(recipient(1, ""), Ping())

        email_service.send_email.assert_not_called()

    def test_notify_delivery_failure_raises(self, service, email_service):
        email_service.send_email.return_value = False

        with pytest.raises(NotificationDeliveryError) as exc_info:
            service.notify(recipient(1, "ada@example.com"), Ping())

        assert exc_info.value.recipient == "ada@example.com"

    def test_notify_many_counts_results(self, service, email_service):
        email_service.send_email.side_effect = [True, False, True]
        recipients = [
            recipient(1, "a@example.com"),
            recipient(2, "b@example.com"),
            recipient(3, "c@example.com"),
            recipient(4, None),
        ]

        results = service.notify_many(recipients, Ping())

        assert results == {"recipients": 4, "sent": 2, "failed": 2}
        assert email_service.send_email.call_count == 3

    def test_notify_many_consumes_iterable_lazily(self, service, email_service):
        seen = []

        def generate():
            for pk in range(1, 4):
                seen.append(pk)
                yield recipient(pk, f"user{pk}@example.com")

        results = service.notify_many(generate(), Ping())

        assert seen == [1, 2, 3]
        assert results["sent"] == 3

    def test_notify_many_with_no_recipients(self, service, email_service):
        results = service.notify_many([], Ping())

        assert results == {"recipients": 0, "sent": 0, "failed": 0}
        email_service.send_email.assert_not_called()

    def test_notify_many_propagates_unexpected_errors(self, service, email_service):
        email_service.send_email.side_effect = RuntimeError("template exploded")

        with pytest.raises(RuntimeError):
            service.notify_many([recipient(1, "a@example.com")], Ping())

    @pytest.mark.asyncio
    async def test_anotify(self, service, email_service):
        result = await service.anotify(recipient(1, "ada@example.com"), Ping())

        assert result == {"mail": True}
