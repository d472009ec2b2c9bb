"""Query parameters for listing the requester's tasks."""

from pydantic import Field

from core.constants.task import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
)
from core.enums import SortOrder, TaskQueryType, TaskReaction, TaskSortField, TaskStatus
from core.schemas.base_schema_model import BaseSchemaModel


class TaskListQuery(BaseSchemaModel):
    """Query string of GET /tasks/my-tasks.

    ``type`` selects the requester's role: tasks they created or tasks
    assigned to them.
    """

    type: TaskQueryType = Field(..., description="created or assigned")
    page: int = Field(DEFAULT_PAGE, ge=1, description="1-based page number")
    limit: int = Field(
        DEFAULT_PAGE_SIZE,
        ge=MIN_PAGE_SIZE,
        le=MAX_PAGE_SIZE,
        description="Items per page",
    )
    sort_by: TaskSortField = Field(TaskSortField.CREATED_AT, description="Sort field")
    sort_order: SortOrder = Field(SortOrder.DESC, description="Sort direction")
    status: TaskStatus | None = Field(None, description="Status filter")
    reaction: TaskReaction | None = Field(None, description="Reaction filter")
