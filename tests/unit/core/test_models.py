"""Tests for the core models."""

import uuid

import pytest

from core.enums import NotificationStatusEnum
from tests.factories import NotificationFactory, TaskFactory, UserFactory


@pytest.mark.django_db
class TestUserModel:
    """Test suite for User model."""

    def test_display_name(self):
        """Test display_name falls back when the name is blank."""
        assert UserFactory(name="Dana").display_name == "Dana"
        assert UserFactory(name="").display_name == "Unknown"

    def test_str_representation(self):
        """Test user string representation."""
        user = UserFactory(name="Dana", email="dana@example.com")

        assert str(user) == "Dana (dana@example.com)"


@pytest.mark.django_db
class TestTaskModel:
    """Test suite for Task model."""

    def test_is_participant(self):
        """Test only the creator and the assignee participate."""
        task = TaskFactory()

        assert task.is_participant(task.creator_id)
        assert task.is_participant(task.assignee_id)
        assert not task.is_participant("someone-else")

    def test_repr(self):
        """Test task repr."""
        task = TaskFactory()

        result = repr(task)
        assert "Task" in result
        assert str(task.task_id) in result
        assert "pending" in result


@pytest.mark.django_db
class TestNotificationModel:
    """Test suite for Notification model."""

    @pytest.fixture
    def notification(self):
        """Create test notification."""
        return NotificationFactory(task_id=uuid.uuid4())

    def test_defaults(self, notification):
        """Test notification is created pending and unread."""
        assert notification.status == NotificationStatusEnum.PENDING.value
        assert notification.is_read is False
        assert notification.sent_at is None
        assert notification.provider_message_id is None

    def test_mark_sent(self, notification):
        """Test mark_sent records the ticket id."""
        notification.mark_sent("ticket-1")

        notification.refresh_from_db()
        assert notification.status == NotificationStatusEnum.SENT.value
        assert notification.provider_message_id == "ticket-1"
        assert notification.sent_at is not None

    def test_mark_failed(self, notification):
        """Test mark_failed records the reason."""
        notification.mark_failed("Invalid Expo push token format")

        notification.refresh_from_db()
        assert notification.status == NotificationStatusEnum.FAILED.value
        assert notification.error_message == "Invalid Expo push token format"

    def test_mark_read(self, notification):
        """Test mark_read flips is_read and stamps read_at."""
        notification.mark_read()

        notification.refresh_from_db()
        assert notification.is_read is True
        assert notification.read_at is not None
        assert notification.status == NotificationStatusEnum.READ.value

    def test_str_representation(self, notification):
        """Test notification string representation."""
        assert str(notification) == f"task_assigned for user {notification.recipient_id}"
