"""Request schema for changing a task's status."""

from pydantic import Field

from core.enums import TaskStatus
from core.schemas.base_schema_model import BaseSchemaModel


class UpdateTaskStatusRequest(BaseSchemaModel):
    """Request body for PATCH /tasks/{id}/status."""

    status: TaskStatus = Field(..., description="Target status")
