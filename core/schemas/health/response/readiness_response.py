"""Readiness check response."""

from typing import Literal

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.health.dependency_health import DependencyHealth


class ReadinessResponse(BaseSchemaModel):
    """Whether the pod should receive traffic.

    The service is ready only when every dependency check is healthy.
    """

    ready: bool = Field(..., description="Every dependency is healthy")
    status: Literal["ready", "not ready"]
    dependencies: dict[str, DependencyHealth] = Field(
        ..., description="Check result per dependency name"
    )

    @classmethod
    def from_checks(cls, checks: dict[str, DependencyHealth]) -> "ReadinessResponse":
        ready = all(check.healthy for check in checks.values())
        return cls(
            ready=ready,
            status="ready" if ready else "not ready",
            dependencies=checks,
        )
