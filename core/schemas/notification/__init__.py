"""Notification schemas."""

from core.schemas.notification.request import NotificationListQuery
from core.schemas.notification.response import (
    NotificationListResponse,
    NotificationPageInfo,
    NotificationResponse,
    UnreadCountResponse,
)

__all__ = [
    "NotificationListQuery",
    "NotificationListResponse",
    "NotificationPageInfo",
    "NotificationResponse",
    "UnreadCountResponse",
]
