"""Exception handling utilities for the task alert service."""

from core.exceptions.downstream_exceptions import (
    DownstreamServiceError,
    PushDeliveryError,
)
from core.exceptions.handlers import custom_exception_handler
from core.exceptions.task_exceptions import (
    ForbiddenError,
    InvalidRequestError,
    InvalidStateError,
    InvalidTransitionError,
    LimitExceededError,
    NotFoundError,
    NotificationNotFoundError,
    TaskAccessDeniedError,
    TaskNotFoundError,
    TaskServiceError,
    UserNotFoundError,
)

__all__ = [
    "DownstreamServiceError",
    "ForbiddenError",
    "InvalidRequestError",
    "InvalidStateError",
    "InvalidTransitionError",
    "LimitExceededError",
    "NotFoundError",
    "NotificationNotFoundError",
    "PushDeliveryError",
    "TaskAccessDeniedError",
    "TaskNotFoundError",
    "TaskServiceError",
    "UserNotFoundError",
    "custom_exception_handler",
]
