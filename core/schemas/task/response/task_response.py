"""Response schemas for a single task."""

from datetime import datetime

from pydantic import Field

from core.enums import TaskReaction, TaskStatus
from core.expiry import is_expired, remaining_minutes
from core.schemas.base_schema_model import BaseSchemaModel


class TaskUserRef(BaseSchemaModel):
    """Creator or assignee snapshot embedded in a task."""

    uid: str
    email: str
    name: str


class TaskUrgency(BaseSchemaModel):
    """Expiry information with values derived at response time."""

    expires_at: datetime
    duration_minutes: int
    remaining_minutes: int = Field(..., ge=0)
    is_expired: bool


class TaskNotificationInfo(BaseSchemaModel):
    """Outcome of the assignment notification."""

    sent: bool
    sent_at: datetime | None = None
    error: str | None = None


class TaskResponse(BaseSchemaModel):
    """Task as returned by every task endpoint."""

    id: str
    title: str
    note: str | None = None
    created_by: TaskUserRef
    assigned_to: TaskUserRef
    status: TaskStatus
    assignee_reaction: TaskReaction | None = None
    urgency: TaskUrgency
    notification: TaskNotificationInfo
    created_at: datetime
    updated_at: datetime
    extension_count: int = Field(..., ge=0)

    @classmethod
    def from_task(cls, task, now: datetime) -> "TaskResponse":
        """Build the response for ``task`` as seen at ``now``.

        Args:
            task: Task model instance
            now: Instant used for remaining minutes and the expired flag

        Returns:
            TaskResponse
        """
        return cls(
            id=str(task.task_id),
            title=task.title,
            note=task.note,
            created_by=TaskUserRef(
                uid=task.creator_id, email=task.creator_email, name=task.creator_name
            ),
            assigned_to=TaskUserRef(
                uid=task.assignee_id,
                email=task.assignee_email,
                name=task.assignee_name,
            ),
            status=task.status,
            assignee_reaction=task.assignee_reaction,
            urgency=TaskUrgency(
                expires_at=task.expires_at,
                duration_minutes=task.duration_minutes,
                remaining_minutes=remaining_minutes(task.expires_at, now),
                is_expired=is_expired(task.expires_at, now),
            ),
            notification=TaskNotificationInfo(
                sent=task.notification_sent,
                sent_at=task.notification_sent_at,
                error=task.notification_error,
            ),
            created_at=task.created_at,
            updated_at=task.updated_at,
            extension_count=task.extension_count,
        )
