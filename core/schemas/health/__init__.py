"""Payloads served by the health endpoints."""

from core.schemas.health.dependency_health import DependencyHealth
from core.schemas.health.response import LivenessResponse, ReadinessResponse

__all__ = ["DependencyHealth", "LivenessResponse", "ReadinessResponse"]
