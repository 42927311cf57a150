"""
Pytest configuration and shared fixtures for Chirper tests.

Lives at the project root so the app test packages (accounts/tests,
chirps/tests) and tests/ all see the same fixtures.

Django is configured by pytest-django from DJANGO_SETTINGS_MODULE in
pyproject.toml (chirper.settings.test).
"""

from unittest.mock import Mock

from django.contrib.auth import get_user_model

import pytest


@pytest.fixture
def make_user(db):
    """Factory creating users with unique emails."""
    counter = {"n": 0}

    def _make_user(email=None, first_name="Test", last_name="User", **kwargs):
        counter["n"] += 1
        email = email or f"user{counter['n']}@example.com"
        return get_user_model().objects.create_user(
            email=email,
            username=email,
            password="testpass123",
            first_name=first_name,
            last_name=last_name,
            **kwargs,
        )

    return _make_user


@pytest.fixture
def test_user(make_user):
    """Create a test user for testing."""
    return make_user(email="test@example.com", first_name="Ada", last_name="Lovelace")


@pytest.fixture
def mock_user():
    """Create a mock user for unit tests (does not touch database)."""
    user = Mock(spec=get_user_model())
    user.pk = 1
    user.id = 1
    user.email = "test@example.com"
    user.display_name = "Test User"
    return user
