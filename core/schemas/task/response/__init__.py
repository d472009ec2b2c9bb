"""Task response schemas."""

from core.schemas.task.response.pagination_meta import PaginationMeta
from core.schemas.task.response.task_envelope import TaskEnvelope, TaskListResponse
from core.schemas.task.response.task_response import (
    TaskNotificationInfo,
    TaskResponse,
    TaskUrgency,
    TaskUserRef,
)

__all__ = [
    "PaginationMeta",
    "TaskEnvelope",
    "TaskListResponse",
    "TaskNotificationInfo",
    "TaskResponse",
    "TaskUrgency",
    "TaskUserRef",
]
