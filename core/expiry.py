"""Clock-free helpers for lazy task expiry.

Tasks are never expired by a background job. Readers compare the expiry
instant with the current time and persist the transition when they see it.
Every function here takes ``now`` explicitly.
"""

import math
from datetime import datetime

from core.constants.task import TTL_AFTER_EXPIRY
from core.enums import TaskStatus


def is_expired(expires_at: datetime, now: datetime) -> bool:
    """Return True once ``now`` has reached the expiry instant."""
    return now >= expires_at


def remaining_minutes(expires_at: datetime, now: datetime) -> int:
    """Whole minutes left before expiry, never negative."""
    seconds = (expires_at - now).total_seconds()
    return max(0, math.floor(seconds / 60))


def compute_ttl(expires_at: datetime) -> datetime:
    """Retention marker for a task expiring at ``expires_at``."""
    return expires_at + TTL_AFTER_EXPIRY


def reconcile_expiry(task, now: datetime) -> bool:
    """Apply a due expiry to ``task`` in memory.

    Idempotent: only a pending task whose expiry has passed changes, and
    calling it again is a no-op.

    Args:
        task: Task instance; not saved
        now: Current instant

    Returns:
        True if the task transitioned to expired and needs persisting
    """
    if task.status != TaskStatus.PENDING.value:
        return False
    if not is_expired(task.expires_at, now):
        return False
    task.status = TaskStatus.EXPIRED.value
    task.updated_at = now
    return True
