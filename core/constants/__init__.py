"""Constants package for core application."""

from core.constants.http import (
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    SLOW_REQUEST_THRESHOLD,
)

__all__ = [
    "PROCESS_TIME_HEADER",
    "REQUEST_ID_HEADER",
    "SLOW_REQUEST_THRESHOLD",
]
