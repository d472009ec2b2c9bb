"""Notification request schemas."""

from core.schemas.notification.request.notification_list_query import (
    NotificationListQuery,
)

__all__ = ["NotificationListQuery"]
