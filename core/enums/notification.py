"""Notification-related enumerations.

This module contains enums for notification types and delivery statuses
used by the dispatch coordinator and the user-facing notification API.
"""

from enum import Enum


class NotificationType(str, Enum):
    """Lifecycle event that produced a notification."""

    TASK_ASSIGNED = "task_assigned"
    TASK_REACTION = "task_reaction"
    TASK_COMPLETED = "task_completed"
    TASK_REMINDER = "task_reminder"
    TASK_UPDATED = "task_updated"
    TASK_DELETED = "task_deleted"
    SYSTEM_ALERT = "system_alert"


class NotificationStatusEnum(str, Enum):
    """Notification delivery status values.

    The dispatch path only moves PENDING to SENT or FAILED. READ is set by
    the recipient; DELIVERED is reserved for provider receipts.
    """

    PENDING = "pending"
    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"
    FAILED = "failed"
