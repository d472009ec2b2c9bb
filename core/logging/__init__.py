"""Logging utilities for the task alert service."""

from core.logging.config import setup_logging
from core.logging.context import (
    clear_request_context,
    get_request_id,
    get_user_id,
    set_request_id,
    set_user_id,
)

__all__ = [
    "clear_request_context",
    "get_request_id",
    "get_user_id",
    "set_request_id",
    "set_user_id",
    "setup_logging",
]
