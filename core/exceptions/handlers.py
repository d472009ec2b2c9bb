"""Global exception handler for the task alert API."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.http import Http404

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions.downstream_exceptions import DownstreamServiceError
from core.exceptions.task_exceptions import TaskServiceError
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    Domain errors (TaskServiceError subclasses) are reported with their own
    status code and error code. Downstream failures that escape a view become
    502 responses. Anything else DRF does not recognise becomes a 500.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else None
    request_id = get_request_id()

    # Let DRF handle its own exceptions first
    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, TaskServiceError):
            response = Response(
                _create_error_response(
                    status_code=exc.status_code,
                    error=exc.error_code,
                    message=exc.message,
                    request_id=request_id,
                ),
                status=exc.status_code,
            )
        elif isinstance(exc, DownstreamServiceError):
            response = Response(
                _create_error_response(
                    status_code=status.HTTP_502_BAD_GATEWAY,
                    error="DOWNSTREAM_ERROR",
                    message=str(exc),
                    request_id=request_id,
                ),
                status=status.HTTP_502_BAD_GATEWAY,
            )
        else:
            response = Response(
                _create_error_response(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    error="INTERNAL_ERROR",
                    message="An internal server error occurred.",
                    request_id=request_id,
                ),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    if request_id:
        response["X-Request-ID"] = request_id

    _log_exception(exc, request, response)

    return response


def _create_error_response(
    status_code: int, error: str, message: str, request_id: str | None
) -> dict[str, Any]:
    """Create a standardized error response body.

    Args:
        status_code: The HTTP status code.
        error: Machine-readable error code.
        message: The error message to return to the client.
        request_id: The request ID for tracing.

    Returns:
        Dictionary with standard error response format.
    """
    return {
        "status": status_code,
        "error": error,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _log_exception(exc: Exception, request: Any, response: Response) -> None:
    """Log exception details; 4xx as warning, everything else as error.

    Args:
        exc: The exception that was raised.
        request: The HTTP request object.
        response: The response that will be returned.
    """
    status_code = response.status_code
    log_level = logging.WARNING if 400 <= status_code < 500 else logging.ERROR

    request_path = request.path if request else "unknown"
    request_method = request.method if request else "unknown"

    log_message = (
        f"Exception occurred: {type(exc).__name__}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {status_code}"
    )

    if settings.DEBUG and not isinstance(exc, (Http404, APIException)):
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

    logger.log(log_level, log_message)
