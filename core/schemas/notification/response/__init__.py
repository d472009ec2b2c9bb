"""Notification response schemas."""

from core.schemas.notification.response.notification_list_response import (
    NotificationListResponse,
    NotificationPageInfo,
)
from core.schemas.notification.response.notification_response import (
    NotificationResponse,
)
from core.schemas.notification.response.unread_count_response import (
    UnreadCountResponse,
)

__all__ = [
    "NotificationListResponse",
    "NotificationPageInfo",
    "NotificationResponse",
    "UnreadCountResponse",
]
