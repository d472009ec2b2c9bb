"""Task request schemas."""

from core.schemas.task.request.create_task_request import CreateTaskRequest
from core.schemas.task.request.task_list_query import TaskListQuery
from core.schemas.task.request.update_task_reaction_request import (
    UpdateTaskReactionRequest,
)
from core.schemas.task.request.update_task_status_request import (
    UpdateTaskStatusRequest,
)

__all__ = [
    "CreateTaskRequest",
    "TaskListQuery",
    "UpdateTaskReactionRequest",
    "UpdateTaskStatusRequest",
]
