"""Request schema for the assignee's reaction."""

from pydantic import Field

from core.enums import TaskReaction
from core.schemas.base_schema_model import BaseSchemaModel


class UpdateTaskReactionRequest(BaseSchemaModel):
    """Request body for PATCH /tasks/{id}/reaction."""

    reaction: TaskReaction = Field(..., description="Assignee reaction")
