"""Pytest configuration and shared fixtures."""

import os

import django
from django.test import Client

import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "task_alert_service.settings_test")
django.setup()


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def creator(db):
    """User who creates tasks."""
    from tests.factories import UserFactory  # noqa: PLC0415

    return UserFactory(name="Alice Creator", email="alice@example.com")


@pytest.fixture
def assignee(db):
    """User tasks are assigned to, with a registered device."""
    from tests.factories import UserFactory  # noqa: PLC0415

    return UserFactory(
        name="Bob Assignee",
        email="bob@example.com",
        push_token="ExponentPushToken[bob-device]",
    )
