"""Liveness and readiness checks."""

import time

from django.db import connection
from django.db.utils import OperationalError
from django.utils import timezone

import structlog

from core.enums import HealthStatus
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = structlog.get_logger(__name__)


class HealthService:
    """Health checks for the Kubernetes probes.

    The database result is cached for ``cache_ttl_seconds`` so frequent
    probes do not open a connection each time.
    """

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        self.cache_ttl_seconds = cache_ttl_seconds
        self._db_health_cache: DependencyHealth | None = None
        self._db_health_cache_time: float = 0.0

    def get_liveness_status(self) -> LivenessResponse:
        """Return "alive"; liveness never checks dependencies."""
        return LivenessResponse()

    def get_readiness_status(self) -> ReadinessResponse:
        """Report readiness from the database check.

        Returns:
            ReadinessResponse with ready=False when the database is down
        """
        return ReadinessResponse.from_checks({"database": self.check_database_health()})

    def check_database_health(self) -> DependencyHealth:
        """Check database connectivity with caching.

        Uses ensure_connection() so no query is executed.

        Returns:
            DependencyHealth with database status
        """
        current_time = time.time()
        if (
            self._db_health_cache is not None
            and (current_time - self._db_health_cache_time) < self.cache_ttl_seconds
        ):
            return self._db_health_cache

        start_time = time.perf_counter()
        try:
            connection.ensure_connection()
            health = DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="Database connection successful",
                latency_ms=(time.perf_counter() - start_time) * 1000,
                checked_at=timezone.now(),
            )
        except OperationalError as e:
            logger.warning("database_health_check_failed", error=str(e))
            health = DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                latency_ms=(time.perf_counter() - start_time) * 1000,
                checked_at=timezone.now(),
            )

        self._db_health_cache = health
        self._db_health_cache_time = current_time
        return health


health_service = HealthService()
