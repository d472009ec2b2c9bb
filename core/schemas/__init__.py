"""Schemas for the core app."""

from core.schemas.common import MessageResponse
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.notification import (
    NotificationListQuery,
    NotificationListResponse,
    NotificationPageInfo,
    NotificationResponse,
    UnreadCountResponse,
)
from core.schemas.push import ExpoPushMessage, ExpoPushTicket
from core.schemas.task import (
    CreateTaskRequest,
    PaginationMeta,
    TaskEnvelope,
    TaskListQuery,
    TaskListResponse,
    TaskResponse,
    UpdateTaskReactionRequest,
    UpdateTaskStatusRequest,
)
from core.schemas.user import PushTokenRequest

__all__ = [
    "CreateTaskRequest",
    "DependencyHealth",
    "ExpoPushMessage",
    "ExpoPushTicket",
    "LivenessResponse",
    "MessageResponse",
    "NotificationListQuery",
    "NotificationListResponse",
    "NotificationPageInfo",
    "NotificationResponse",
    "PaginationMeta",
    "PushTokenRequest",
    "ReadinessResponse",
    "TaskEnvelope",
    "TaskListQuery",
    "TaskListResponse",
    "TaskResponse",
    "UnreadCountResponse",
    "UpdateTaskReactionRequest",
    "UpdateTaskStatusRequest",
]
