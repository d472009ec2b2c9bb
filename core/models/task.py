"""Task model storing a time-bound assignment between two users.

Creator and assignee are embedded as {id, email, name} snapshots rather
than foreign keys: the users table belongs to the identity service and a
task keeps the names it was created with.
"""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import TaskReaction, TaskStatus


class Task(models.Model):
    """A task assigned by one user to another.

    Attributes:
        task_id: Opaque identifier, stable for the task's lifetime.
        title: Trimmed title (3-200 characters).
        note: Optional trimmed note (up to 1000 characters).
        creator_id: Uid of the user who created the task.
        assignee_id: Uid of the user the task is assigned to.
        status: Lifecycle status, see TaskStatus.
        assignee_reaction: Latest reaction of the assignee, if any.
        expires_at: Urgency expiry instant. Only ever moves forward.
        duration_minutes: Duration requested at creation.
        notification_sent: Whether the assignment notification was delivered.
        notification_sent_at: When the assignment notification was delivered.
        notification_error: Last assignment notification failure.
        extension_count: Number of "running late" extensions applied (0-3).
        ttl: Retention marker, expires_at plus the retention window.
    """

    task_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the task",
    )
    title = models.CharField(max_length=200)
    note = models.TextField(null=True, blank=True)

    creator_id = models.CharField(max_length=128)
    creator_email = models.CharField(max_length=255)
    creator_name = models.CharField(max_length=255)
    assignee_id = models.CharField(max_length=128)
    assignee_email = models.CharField(max_length=255)
    assignee_name = models.CharField(max_length=255)

    status = models.CharField(
        max_length=20,
        choices=[(s.value, s.value) for s in TaskStatus],
        default=TaskStatus.PENDING.value,
    )
    assignee_reaction = models.CharField(
        max_length=20,
        choices=[(r.value, r.value) for r in TaskReaction],
        null=True,
        blank=True,
    )

    expires_at = models.DateTimeField(help_text="When the task expires")
    duration_minutes = models.PositiveIntegerField(
        help_text="Original duration in minutes"
    )

    notification_sent = models.BooleanField(default=False)
    notification_sent_at = models.DateTimeField(null=True, blank=True)
    notification_error = models.TextField(null=True, blank=True)

    extension_count = models.PositiveSmallIntegerField(default=0)
    ttl = models.DateTimeField(help_text="Retention marker for store-side cleanup")
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        """Django model metadata."""

        db_table = "tasks"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["creator_id", "-created_at"]),
            models.Index(fields=["assignee_id", "-created_at"]),
            models.Index(fields=["creator_id", "status"]),
            models.Index(fields=["assignee_id", "status"]),
            models.Index(fields=["ttl"]),
        ]

    def __str__(self) -> str:
        """Return string representation of task."""
        return f"{self.title} ({self.status})"

    def __repr__(self) -> str:
        """Return detailed representation of task."""
        return (
            f"<Task(id={self.task_id}, status={self.status}, "
            f"creator={self.creator_id}, assignee={self.assignee_id})>"
        )

    def is_participant(self, user_id: str) -> bool:
        """Return True if the user created or is assigned the task."""
        return user_id in (self.creator_id, self.assignee_id)
