"""Custom structlog processors for request context and service metadata."""

import os
import threading

from colorama import Fore, Style, init
from structlog.typing import EventDict, WrappedLogger

from core.logging.context import get_request_id, get_user_id

LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}


def add_request_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add request ID and authenticated user ID to log events."""
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    user_id = get_user_id()
    if user_id:
        event_dict.setdefault("auth_user_id", user_id)
    return event_dict


def add_service_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service name and deployment environment to log events."""
    event_dict["service_name"] = os.getenv("SERVICE_NAME", "task-alert-service")
    event_dict["environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def add_process_info(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add process and thread identifiers to log events."""
    event_dict["process_id"] = os.getpid()
    event_dict["thread_id"] = threading.get_ident()
    return event_dict


def console_renderer(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> str:
    """Render log events as colored single-line strings.

    Format: [LEVEL] timestamp | request_id | logger_name | message key=value...

    Structured fields that are not part of the prefix are appended as
    key=value pairs so task and notification ids stay visible on the console.
    """
    init(autoreset=True)

    level = event_dict.pop("level", "info").upper()
    timestamp = event_dict.pop("timestamp", "")
    request_id = event_dict.pop("request_id", "no-request-id")
    logger_name = event_dict.pop("logger", "root")
    message = event_dict.pop("event", "")

    level_color = LEVEL_COLORS.get(level, Fore.WHITE)
    extras = " ".join(
        f"{Fore.CYAN}{key}{Style.RESET_ALL}={value}"
        for key, value in sorted(event_dict.items())
        if key not in {"service_name", "environment", "process_id", "thread_id"}
    )

    formatted = (
        f"{level_color}[{level:<8}]{Style.RESET_ALL} "
        f"{timestamp} | "
        f"{Fore.MAGENTA}{request_id}{Style.RESET_ALL} | "
        f"{Fore.BLUE}{logger_name}{Style.RESET_ALL} | "
        f"{message}"
    )
    if extras:
        formatted = f"{formatted} {extras}"
    return formatted
