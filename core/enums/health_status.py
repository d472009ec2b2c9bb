"""Health status enumeration for service dependencies."""

from enum import Enum


class HealthStatus(str, Enum):
    """Health of a single dependency as reported by the readiness probe."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
