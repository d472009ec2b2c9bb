"""Enumerations for the core app."""

from core.enums.health_status import HealthStatus
from core.enums.notification import NotificationStatusEnum, NotificationType
from core.enums.task import (
    SortOrder,
    TaskQueryType,
    TaskReaction,
    TaskSortField,
    TaskStatus,
)

__all__ = [
    "HealthStatus",
    "NotificationStatusEnum",
    "NotificationType",
    "SortOrder",
    "TaskQueryType",
    "TaskReaction",
    "TaskSortField",
    "TaskStatus",
]
