"""Tests for Chirper template context processors."""

from chirper.context_processors import app_environment, mail_capture


def test_app_environment(settings, rf):
    settings.APP_NAME = "Chirper"
    settings.DEBUG = False

    assert app_environment(rf.get("/")) == {"APP_NAME": "Chirper", "APP_DEBUG": False}


def test_mail_capture_link_when_debugging(settings, rf):
    settings.DEBUG = True
    settings.MAIL_CAPTURE_URL = "http://localhost:8025"

    assert mail_capture(rf.get("/")) == {"MAIL_CAPTURE_URL": "http://localhost:8025"}


def test_mail_capture_hidden_outside_debug(settings, rf):
    settings.DEBUG = False
    settings.MAIL_CAPTURE_URL = "http://localhost:8025"

    assert mail_capture(rf.get("/")) == {"MAIL_CAPTURE_URL": None}
