"""Domain exceptions raised by the task lifecycle and notification services.

Each exception carries the HTTP status and machine-readable code the API
layer reports, so services never import DRF.
"""


class TaskServiceError(Exception):
    """Base exception for task and notification domain errors."""

    status_code = 500
    default_error_code = "INTERNAL_ERROR"

    def __init__(self, message: str, error_code: str | None = None):
        """Initialize domain error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code (defaults per class)
        """
        self.message = message
        self.error_code = error_code or self.default_error_code
        super().__init__(message)


class NotFoundError(TaskServiceError):
    """Requested entity does not exist (404)."""

    status_code = 404
    default_error_code = "NOT_FOUND"


class TaskNotFoundError(NotFoundError):
    """Task does not exist."""

    default_error_code = "TASK_NOT_FOUND"

    def __init__(self, task_id: str):
        """Initialize task not found error.

        Args:
            task_id: ID of the task that was not found
        """
        self.task_id = task_id
        super().__init__("Task not found")


class UserNotFoundError(NotFoundError):
    """User does not exist in the users table."""

    default_error_code = "USER_NOT_FOUND"

    def __init__(self, message: str, user_id: str | None = None):
        """Initialize user not found error.

        Args:
            message: Error message
            user_id: ID or email that was looked up
        """
        self.user_id = user_id
        super().__init__(message)


class NotificationNotFoundError(NotFoundError):
    """Notification does not exist or is not visible to the requester."""

    default_error_code = "NOTIFICATION_NOT_FOUND"

    def __init__(self, notification_id: str):
        """Initialize notification not found error.

        Args:
            notification_id: ID of the notification that was not found
        """
        self.notification_id = notification_id
        super().__init__("Notification not found")


class ForbiddenError(TaskServiceError):
    """Requester is not allowed to perform a role-gated action (403)."""

    status_code = 403
    default_error_code = "ACCESS_DENIED"


class TaskAccessDeniedError(ForbiddenError):
    """Requester is neither the creator nor the assignee of a task."""

    def __init__(self, task_id: str, user_id: str):
        """Initialize access denied error.

        Args:
            task_id: ID of the task
            user_id: ID of the requesting user
        """
        self.task_id = task_id
        self.user_id = user_id
        super().__init__("You do not have access to this task")


class InvalidRequestError(TaskServiceError):
    """Malformed input or self-assignment (400)."""

    status_code = 400
    default_error_code = "INVALID_REQUEST"


class InvalidTransitionError(TaskServiceError):
    """Status transition out of a terminal status (400)."""

    status_code = 400
    default_error_code = "INVALID_STATUS_TRANSITION"


class InvalidStateError(TaskServiceError):
    """Operation not allowed in the task's current status (400)."""

    status_code = 400
    default_error_code = "INVALID_STATE"


class LimitExceededError(TaskServiceError):
    """A bounded counter has reached its cap (400)."""

    status_code = 400
    default_error_code = "LIMIT_EXCEEDED"
