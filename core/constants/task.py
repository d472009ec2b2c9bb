"""Task lifecycle constants: durations, limits and user-facing messages."""

from datetime import timedelta

# Retention marker: rows become eligible for store-side cleanup this long
# after their expiry instant.
TTL_AFTER_EXPIRY = timedelta(days=7)

RUNNING_LATE_EXTENSION = timedelta(minutes=30)
MAX_EXTENSIONS = 3

MIN_DURATION_MINUTES = 5
MAX_DURATION_MINUTES = 1440
DEFAULT_DURATION_MINUTES = 30

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
NOTE_MAX_LENGTH = 1000

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100


class TaskErrorMessages:
    """Error messages surfaced to API clients."""

    TASK_NOT_FOUND = "Task not found"
    CREATOR_NOT_FOUND = "Creator user not found"
    SELF_ASSIGNMENT = "Cannot assign task to yourself"
    ACCESS_DENIED = "You do not have access to this task"
    CANNOT_UPDATE_EXPIRED = "Cannot update an expired task"
    ALREADY_COMPLETED = "Task is already completed"
    ALREADY_CANCELLED = "Task is already cancelled"
    CANNOT_REACT = "Cannot react to non-pending tasks"
    MAX_EXTENSIONS = "Maximum number of extensions reached"
    ONLY_ASSIGNEE_CAN_REACT = "Only assignee can set reaction"
    ONLY_CREATOR_CAN_CANCEL = "Only task creator can cancel the task"
    ONLY_ASSIGNEE_CAN_COMPLETE = "Only assignee can mark task as completed"
    ONLY_CREATOR_CAN_DELETE = "Only task creator can delete the task"

    @staticmethod
    def assignee_not_found(email: str) -> str:
        """Message for an assignee email with no matching user."""
        return f"User with email {email} not found"


class TaskSuccessMessages:
    """Success messages returned alongside task payloads."""

    TASK_CREATED = "Task created and assigned successfully"
    STATUS_UPDATED = "Task status updated successfully"
    REACTION_UPDATED = "Reaction updated successfully"
    TASK_COMPLETED = "Task marked as completed"
    TASK_CANCELLED = "Task cancelled successfully"
    TASK_DELETED = "Task deleted successfully"
    TASKS_RETRIEVED = "Tasks retrieved successfully"
    TIME_EXTENDED = "Task time extended by 30 minutes"
