"""Tests for the Chirp notification fan-out task."""

from unittest.mock import patch

from django.db import OperationalError

import pytest
from celery.exceptions import Retry

from chirps.models import Chirp
from chirps.tasks import send_chirp_created_notifications


@pytest.mark.django_db
class TestSendChirpCreatedNotifications:
    def test_emails_every_other_active_user(self, make_user, mailoutbox):
        author = make_user(email="author@example.com", first_name="Ada", last_name="Lovelace")
        make_user(email="grace@example.com")
        make_user(email="alan@example.com")
        make_user(email="gone@example.com", is_active=False)
        chirp = Chirp.objects.create(user=author, message="Hello, world")

        result = send_chirp_created_notifications(chirp.pk)

        assert result == {
            "chirp_id": chirp.pk,
            "skipped": False,
            "recipients": 2,
            "sent": 2,
            "failed": 0,
        }
        recipients = sorted(email.to[0] for email in mailoutbox)
        assert recipients == ["alan@example.com", "grace@example.com"]

    def test_one_email_per_recipient(self, make_user, mailoutbox):
        author = make_user(first_name="Ada", last_name="Lovelace")
        make_user()
        make_user()
        chirp = Chirp.objects.create(user=author, message="Hello")

        send_chirp_created_notifications(chirp.pk)

        assert all(len(email.to) == 1 for email in mailoutbox)

    def test_email_contents(self, make_user, mailoutbox):
        author = make_user(email="author@example.com", first_name="Ada", last_name="Lovelace")
        make_user(email="reader@example.com")
        chirp = Chirp.objects.create(user=author, message="x" * 80)

        send_chirp_created_notifications(chirp.pk)

        email = mailoutbox[0]
        assert email.subject == "New Chirp from Ada Lovelace"
        assert email.from_email == "Chirper <hello@example.com>"
        assert "x" * 50 + "..." in email.body
        assert "x" * 51 not in email.body
        assert "http://testserver/chirps/" in email.body
        html_body, mimetype = email.alternatives[0]
        assert mimetype == "text/html"
        assert "Go to Chirper" in html_body

    def test_author_alone_gets_nothing(self, make_user, mailoutbox):
        author = make_user()
        chirp = Chirp.objects.create(user=author, message="Anyone here?")

        result = send_chirp_created_notifications(chirp.pk)

        assert result["recipients"] == 0
        assert mailoutbox == []

    def test_streams_recipients_in_chunks(self, make_user, mailoutbox, settings):
        settings.NOTIFICATION_CURSOR_CHUNK_SIZE = 1
        author = make_user()
        for _ in range(3):
            make_user()
        chirp = Chirp.objects.create(user=author, message="Hello")

        result = send_chirp_created_notifications(chirp.pk)

        assert result["sent"] == 3
        assert len(mailoutbox) == 3

    def test_deleted_chirp_is_skipped(self, make_user, mailoutbox):
        make_user()

        result = send_chirp_created_notifications(999999)

        assert result == {
            "chirp_id": 999999,
            "skipped": True,
            "recipients": 0,
            "sent": 0,
            "failed": 0,
        }
        assert mailoutbox == []

    def test_failed_delivery_is_counted(self, make_user, mailoutbox):
        author = make_user()
        make_user(email="ok@example.com")
        make_user(email="bounce@example.com")
        chirp = Chirp.objects.create(user=author, message="Hello")

        def fake_send(subject, body, recipient, **kwargs):
            return recipient != "bounce@example.com"

        with patch(
            "services.notifications.email.email_service.EmailService.send_email",
            side_effect=fake_send,
        ):
            result = send_chirp_created_notifications(chirp.pk)

        assert result["recipients"] == 2
        assert result["sent"] == 1
        assert result["failed"] == 1

    def test_unexpected_error_retries_job(self, make_user):
        author = make_user()
        make_user()
        chirp = Chirp.objects.create(user=author, message="Hello")

        with patch("chirps.tasks.NotificationService") as mock_service:
            mock_service.return_value.notify_many.side_effect = RuntimeError("db gone")
            with patch.object(
                send_chirp_created_notifications, "retry", side_effect=Retry()
            ) as mock_retry:
                with pytest.raises(Retry):
                    send_chirp_created_notifications(chirp.pk)

        mock_retry.assert_called_once()
        assert mock_retry.call_args.kwargs["countdown"] == 60
        assert isinstance(mock_retry.call_args.kwargs["exc"], RuntimeError)

    def test_database_error_loading_chirp_retries_job(self, make_user):
        chirp = Chirp.objects.create(user=make_user(), message="Hello")

        with patch.object(
            Chirp.objects, "select_related", side_effect=OperationalError("db down")
        ):
            with patch.object(
                send_chirp_created_notifications, "retry", side_effect=Retry()
            ) as mock_retry:
                with pytest.raises(Retry):
                    send_chirp_created_notifications(chirp.pk)

        mock_retry.assert_called_once()
        assert mock_retry.call_args.kwargs["countdown"] == 60
        assert isinstance(mock_retry.call_args.kwargs["exc"], OperationalError)

    def test_error_is_raised_once_retries_are_exhausted(self, make_user):
        author = make_user()
        chirp = Chirp.objects.create(user=author, message="Hello")

        with patch("chirps.tasks.NotificationService") as mock_service:
            mock_service.return_value.notify_many.side_effect = RuntimeError("db gone")
            with patch.object(send_chirp_created_notifications, "max_retries", 0):
                with pytest.raises(RuntimeError, match="db gone"):
                    send_chirp_created_notifications(chirp.pk)

    def test_queued_through_celery(self, make_user, mailoutbox):
        """Eager mode runs the job in-process, as a worker would."""
        author = make_user()
        make_user(email="reader@example.com")
        chirp = Chirp.objects.create(user=author, message="Hello")

        result = send_chirp_created_notifications.delay(chirp.pk)

        assert result.get()["sent"] == 1
        assert mailoutbox[0].to == ["reader@example.com"]
