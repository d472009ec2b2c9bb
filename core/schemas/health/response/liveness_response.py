"""Liveness check response."""

from typing import Literal

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class LivenessResponse(BaseSchemaModel):
    """The process is up; no dependency is consulted."""

    status: Literal["alive"] = "alive"
    service: str = Field(
        "task-alert-service", description="Service answering the check"
    )
