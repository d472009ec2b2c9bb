"""Schema for a notification as shown in the user's inbox."""

from datetime import datetime
from typing import Any

from pydantic import Field

from core.enums import NotificationStatusEnum, NotificationType
from core.schemas.base_schema_model import BaseSchemaModel


class NotificationResponse(BaseSchemaModel):
    """Notification payload returned by the notification endpoints."""

    id: str = Field(..., description="Notification ID")
    type: NotificationType = Field(..., description="Lifecycle event type")
    recipient_uid: str
    sender_uid: str
    task_id: str
    title: str
    body: str
    data: dict[str, Any] = Field(default_factory=dict)
    status: NotificationStatusEnum
    is_read: bool
    created_at: datetime
    sent_at: datetime | None = None
    read_at: datetime | None = None

    @classmethod
    def from_notification(cls, notification) -> "NotificationResponse":
        """Build the response from a Notification model instance."""
        return cls(
            id=str(notification.notification_id),
            type=notification.notification_type,
            recipient_uid=notification.recipient_id,
            sender_uid=notification.sender_id,
            task_id=str(notification.task_id),
            title=notification.title,
            body=notification.body,
            data=notification.data or {},
            status=notification.status,
            is_read=notification.is_read,
            created_at=notification.created_at,
            sent_at=notification.sent_at,
            read_at=notification.read_at,
        )
