"""Database models for core application."""

from core.models.notification import Notification
from core.models.task import Task
from core.models.user import User

__all__ = ["Notification", "Task", "User"]
