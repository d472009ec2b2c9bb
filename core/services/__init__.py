"""Services for the core app."""

from core.services.health_service import HealthService, health_service

# Task and notification services are not exported here to avoid importing
# models during Django app initialization. Import them from their modules.

__all__ = [
    "HealthService",
    "health_service",
]
