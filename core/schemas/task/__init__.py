"""Task schemas."""

from core.schemas.task.request import (
    CreateTaskRequest,
    TaskListQuery,
    UpdateTaskReactionRequest,
    UpdateTaskStatusRequest,
)
from core.schemas.task.response import (
    PaginationMeta,
    TaskEnvelope,
    TaskListResponse,
    TaskNotificationInfo,
    TaskResponse,
    TaskUrgency,
    TaskUserRef,
)

__all__ = [
    "CreateTaskRequest",
    "PaginationMeta",
    "TaskEnvelope",
    "TaskListQuery",
    "TaskListResponse",
    "TaskNotificationInfo",
    "TaskResponse",
    "TaskUrgency",
    "TaskUserRef",
    "UpdateTaskReactionRequest",
    "UpdateTaskStatusRequest",
]
