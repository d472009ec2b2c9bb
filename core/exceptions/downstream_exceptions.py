"""Custom exceptions for downstream service communication."""


class DownstreamServiceError(Exception):
    """Base exception for downstream service errors."""

    def __init__(
        self,
        message: str,
        service_name: str | None = None,
        status_code: int | None = None,
    ):
        """Initialize downstream service error.

        Args:
            message: Error message
            service_name: Name of the downstream service
            status_code: HTTP status code if applicable
        """
        self.service_name = service_name
        self.status_code = status_code
        super().__init__(message)


class PushDeliveryError(DownstreamServiceError):
    """Push provider rejected a message.

    Raised after the notification row has been marked failed, so callers
    that want to retry or alert can react to provider-level failures.
    """

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        status_code: int | None = None,
    ):
        """Initialize push delivery error.

        Args:
            message: Provider error message
            details: Provider error details (e.g. {"error": "DeviceNotRegistered"})
            status_code: HTTP status code if the rejection was HTTP-level
        """
        self.details = details or {}
        super().__init__(
            message=message,
            service_name="expo-push",
            status_code=status_code,
        )
