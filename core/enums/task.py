"""Task-related enumerations.

Values are the wire format used in request bodies, query strings and
stored rows, so they must stay stable.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Lifecycle status of a task.

    PENDING is the only non-terminal status. COMPLETED, CANCELLED and
    EXPIRED are absorbing: no transition leaves them.
    """

    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition is allowed from this status."""
        return self is not TaskStatus.PENDING


class TaskReaction(str, Enum):
    """Assignee reactions to a pending task."""

    ON_IT = "on_it"
    RUNNING_LATE = "running_late"
    NEED_HELP = "need_help"


class TaskQueryType(str, Enum):
    """Which side of the assignment a task listing is scoped to."""

    CREATED = "created"
    ASSIGNED = "assigned"


class TaskSortField(str, Enum):
    """Sortable task fields as exposed by the API."""

    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    EXPIRES_AT = "urgency.expiresAt"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
