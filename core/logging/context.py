"""Thread-local request context used to enrich log events."""

import threading

_request_context = threading.local()


def set_request_id(request_id: str) -> None:
    """Store the current request ID.

    Args:
        request_id: The unique request identifier to store.
    """
    _request_context.request_id = request_id


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return getattr(_request_context, "request_id", None)


def set_user_id(user_id: str) -> None:
    """Store the authenticated user's ID for the current request.

    Args:
        user_id: Uid of the authenticated user.
    """
    _request_context.user_id = user_id


def get_user_id() -> str | None:
    """Return the authenticated user's ID, or None if not authenticated."""
    return getattr(_request_context, "user_id", None)


def clear_request_context() -> None:
    """Drop all request-scoped values.

    Called once the response is produced so context does not bleed into the
    next request served by the same thread.
    """
    for attr in ("request_id", "user_id"):
        if hasattr(_request_context, attr):
            delattr(_request_context, attr)
