"""Tests for the notify_chirp management command."""

from io import StringIO
from unittest.mock import patch

from django.core.management import CommandError, call_command

import pytest

from chirps.models import Chirp

pytestmark = [pytest.mark.django_db]


@pytest.fixture
def chirp(make_user):
    author = make_user(first_name="Ada", last_name="Lovelace")
    make_user(email="reader@example.com")
    return Chirp.objects.create(user=author, message="Hello")


def test_command_queues_job(chirp):
    out = StringIO()
    with patch(
        "chirps.management.commands.notify_chirp.send_chirp_created_notifications"
    ) as mock_task:
        mock_task.delay.return_value.id = "task-123"
        call_command("notify_chirp", str(chirp.pk), stdout=out)

    mock_task.delay.assert_called_once_with(chirp.pk)
    assert f"Queued notifications for chirp {chirp.pk} (task task-123)" in out.getvalue()


def test_command_sync_sends_mail(chirp, mailoutbox):
    out = StringIO()

    call_command("notify_chirp", str(chirp.pk), "--sync", stdout=out)

    output = out.getvalue()
    assert "Recipients: 1" in output
    assert "Sent: 1" in output
    assert "Failed: 0" in output
    assert f"Done notifying for chirp {chirp.pk}" in output
    assert mailoutbox[0].to == ["reader@example.com"]


def test_command_unknown_chirp():
    with pytest.raises(CommandError, match="Chirp 999999 does not exist"):
        call_command("notify_chirp", "999999")
