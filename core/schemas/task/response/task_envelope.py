"""Envelopes wrapping task payloads with a message."""

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.task.response.pagination_meta import PaginationMeta
from core.schemas.task.response.task_response import TaskResponse


class TaskEnvelope(BaseSchemaModel):
    """``{"task": ..., "message": ...}``."""

    task: TaskResponse
    message: str | None = None


class TaskListResponse(BaseSchemaModel):
    """``{"items": [...], "meta": {...}, "message": ...}``."""

    items: list[TaskResponse]
    meta: PaginationMeta
    message: str | None = None
