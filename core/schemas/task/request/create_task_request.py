"""Request schema for creating a task."""

from pydantic import EmailStr, Field, field_validator

from core.constants.task import (
    DEFAULT_DURATION_MINUTES,
    MAX_DURATION_MINUTES,
    MIN_DURATION_MINUTES,
    NOTE_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from core.schemas.base_schema_model import BaseSchemaModel


class CreateTaskRequest(BaseSchemaModel):
    """Request body for POST /tasks."""

    title: str = Field(
        ...,
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
        description="Task title, trimmed",
    )
    note: str | None = Field(
        None,
        max_length=NOTE_MAX_LENGTH,
        description="Optional note; blank notes are stored as null",
    )
    duration_minutes: int = Field(
        DEFAULT_DURATION_MINUTES,
        ge=MIN_DURATION_MINUTES,
        le=MAX_DURATION_MINUTES,
        description="Minutes until the task expires",
    )
    assign_to_email: EmailStr = Field(
        ..., description="Email address of the user the task is assigned to"
    )

    @field_validator("note")
    @classmethod
    def blank_note_to_none(cls, value: str | None) -> str | None:
        """Store blank notes as null."""
        return value or None

    @field_validator("assign_to_email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        """Emails are stored lower case."""
        return value.lower()
