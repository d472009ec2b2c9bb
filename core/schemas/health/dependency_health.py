"""Result of probing one backing service."""

from datetime import datetime

from pydantic import Field, field_validator

from core.enums.health_status import HealthStatus
from core.schemas.base_schema_model import BaseSchemaModel


class DependencyHealth(BaseSchemaModel):
    """Outcome of a single dependency check, e.g. the tasks database."""

    healthy: bool = Field(..., description="Check succeeded")
    status: HealthStatus = Field(..., description="healthy or unhealthy")
    message: str = Field(..., description="Check outcome or driver error")
    latency_ms: float = Field(..., ge=0, description="Check duration in milliseconds")
    checked_at: datetime = Field(..., description="When the check ran")

    @field_validator("latency_ms")
    @classmethod
    def round_latency(cls, v: float) -> float:
        return round(v, 2)
