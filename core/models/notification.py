"""Notification model for task lifecycle push notifications.

Each row is both the user-facing inbox entry and the audit record of a
single delivery attempt.
"""

import uuid
from typing import ClassVar

from django.db import models
from django.utils import timezone

from core.enums import NotificationStatusEnum, NotificationType


class Notification(models.Model):
    """Notification produced by a task lifecycle event.

    The task is referenced by id rather than a foreign key so notification
    history survives task deletion.

    Attributes:
        notification_id: Unique identifier for the notification.
        notification_type: Lifecycle event that produced the notification.
        recipient_id: Uid of the user receiving the notification.
        sender_id: Uid of the user whose action triggered it.
        task_id: Related task.
        title: Push title.
        body: Push body.
        data: Free-form payload delivered with the push message.
        status: Delivery status, see NotificationStatusEnum.
        is_read: Whether the recipient has read the notification.
        provider_message_id: Ticket id returned by the push provider.
        error_message: Failure reason when status is FAILED.
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification",
    )
    notification_type = models.CharField(
        max_length=30,
        choices=[(t.value, t.value) for t in NotificationType],
    )
    recipient_id = models.CharField(max_length=128)
    sender_id = models.CharField(max_length=128)
    task_id = models.UUIDField()
    title = models.CharField(max_length=255)
    body = models.TextField()
    data = models.JSONField(default=dict)
    status = models.CharField(
        max_length=20,
        choices=[(s.value, s.value) for s in NotificationStatusEnum],
        default=NotificationStatusEnum.PENDING.value,
    )
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)
    sent_at = models.DateTimeField(null=True, blank=True)
    read_at = models.DateTimeField(null=True, blank=True)
    provider_message_id = models.CharField(max_length=255, null=True, blank=True)
    error_message = models.TextField(null=True, blank=True)

    class Meta:
        """Django model metadata."""

        db_table = "task_notifications"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at", "-notification_id"]
        indexes: ClassVar[list] = [
            models.Index(fields=["recipient_id", "-created_at"]),
            models.Index(fields=["recipient_id", "is_read"]),
            models.Index(fields=["task_id", "recipient_id", "notification_type"]),
            models.Index(fields=["created_at"]),
        ]

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.notification_type} for user {self.recipient_id}"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.notification_id}, "
            f"type={self.notification_type}, "
            f"recipient={self.recipient_id}, "
            f"status={self.status})>"
        )

    def mark_sent(self, provider_message_id: str) -> None:
        """Mark the notification as accepted by the push provider.

        Args:
            provider_message_id: Ticket id returned by the provider.
        """
        self.status = NotificationStatusEnum.SENT.value
        self.sent_at = timezone.now()
        self.provider_message_id = provider_message_id
        self.save(update_fields=["status", "sent_at", "provider_message_id"])

    def mark_failed(self, error_msg: str) -> None:
        """Mark the notification as failed with a reason.

        Args:
            error_msg: Description of the failure.
        """
        self.status = NotificationStatusEnum.FAILED.value
        self.error_message = error_msg
        self.save(update_fields=["status", "error_message"])

    def mark_read(self) -> None:
        """Mark the notification as read by its recipient."""
        self.is_read = True
        self.read_at = timezone.now()
        self.status = NotificationStatusEnum.READ.value
        self.save(update_fields=["is_read", "read_at", "status"])
