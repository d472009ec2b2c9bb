"""Client for the Expo push notification API."""

import re
from typing import Any

from django.conf import settings

import requests
import structlog
from pydantic import ValidationError

from core.constants.notification import UNKNOWN_MESSAGE_ID, UNKNOWN_PROVIDER_ERROR
from core.exceptions import PushDeliveryError
from core.schemas.push import ExpoPushMessage, ExpoPushTicket
from core.services.downstream.base_downstream_client import BaseDownstreamClient

logger = structlog.get_logger(__name__)

EXPO_TOKEN_PREFIXES = ("ExponentPushToken[", "ExpoPushToken[")
BARE_TOKEN_PATTERN = re.compile(
    r"^[a-z\d]{8}-[a-z\d]{4}-[a-z\d]{4}-[a-z\d]{4}-[a-z\d]{12}$", re.IGNORECASE
)


def is_expo_push_token(token: str | None) -> bool:
    """Return True if ``token`` looks like an Expo push token.

    Accepts ``ExponentPushToken[...]``, ``ExpoPushToken[...]`` and the bare
    UUID-shaped device token.
    """
    if not isinstance(token, str) or not token:
        return False
    if token.startswith(EXPO_TOKEN_PREFIXES) and token.endswith("]"):
        return True
    return bool(BARE_TOKEN_PATTERN.match(token))


class ExpoPushClient(BaseDownstreamClient):
    """Submits single push messages and returns the provider ticket id.

    The client performs no retries; a rejected message is reported once as
    a PushDeliveryError.
    """

    def __init__(
        self,
        push_url: str | None = None,
        access_token: str | None = None,
        timeout: int | None = None,
    ):
        """Initialize the client from settings unless overridden.

        Args:
            push_url: Send endpoint (defaults to settings.EXPO_PUSH_URL)
            access_token: Expo access token for enhanced push security
            timeout: Request timeout in seconds
        """
        super().__init__(
            service_name="expo-push",
            base_url=push_url or settings.EXPO_PUSH_URL,
            access_token=(
                access_token
                if access_token is not None
                else settings.EXPO_ACCESS_TOKEN or None
            ),
            timeout=timeout or settings.EXPO_PUSH_TIMEOUT,
        )

    def _handle_error_response(self, response: requests.Response) -> None:
        message, details = self._parse_request_errors(response)
        raise PushDeliveryError(
            message=message, details=details, status_code=response.status_code
        )

    def send(
        self,
        token: str,
        title: str,
        body: str,
        data: dict[str, Any] | None = None,
    ) -> str:
        """Send one push message.

        Args:
            token: Recipient's Expo push token
            title: Notification title
            body: Notification body
            data: Payload delivered to the app with the message

        Returns:
            Provider ticket id ("unknown" when the ticket carries none)

        Raises:
            PushDeliveryError: If the provider rejects the request or the
                message, or cannot be reached
        """
        message = ExpoPushMessage(to=token, title=title, body=body, data=data or {})

        try:
            response = self._make_request(
                "POST",
                self.base_url,
                json_data=[message.model_dump(by_alias=True)],
            )
        except (requests.Timeout, requests.ConnectionError) as e:
            raise PushDeliveryError(
                message=f"Expo push service unreachable: {e}"
            ) from e
        except requests.RequestException as e:
            raise PushDeliveryError(
                message=f"Expo push request failed: {type(e).__name__}: {e}"
            ) from e

        ticket = self._parse_ticket(response)
        if ticket.is_error:
            logger.warning(
                "expo_ticket_error",
                message=ticket.message,
                details=ticket.details,
            )
            raise PushDeliveryError(
                message=ticket.message or UNKNOWN_PROVIDER_ERROR,
                details=ticket.details,
            )

        return ticket.id or UNKNOWN_MESSAGE_ID

    @staticmethod
    def _parse_ticket(response: requests.Response) -> ExpoPushTicket:
        """Extract the ticket of the single submitted message."""
        try:
            payload = response.json()
        except ValueError as e:
            raise PushDeliveryError(
                message="Expo push service returned a non-JSON response",
                status_code=response.status_code,
            ) from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if isinstance(data, list):
            data = data[0] if data else None
        if not isinstance(data, dict):
            raise PushDeliveryError(
                message=UNKNOWN_PROVIDER_ERROR, status_code=response.status_code
            )

        try:
            return ExpoPushTicket.model_validate(data)
        except ValidationError as e:
            logger.error("expo_ticket_invalid", validation_errors=e.errors())
            raise PushDeliveryError(
                message=UNKNOWN_PROVIDER_ERROR, status_code=response.status_code
            ) from e

    @staticmethod
    def _parse_request_errors(
        response: requests.Response,
    ) -> tuple[str, dict[str, Any]]:
        """Read ``{"errors": [{"code": ..., "message": ...}]}`` bodies."""
        try:
            payload = response.json()
        except ValueError:
            return (f"expo-push returned {response.status_code}", {})

        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors and isinstance(errors, list) and isinstance(errors[0], dict):
            first = errors[0]
            details = {"error": first["code"]} if first.get("code") else {}
            return (first.get("message") or UNKNOWN_PROVIDER_ERROR, details)
        return (f"expo-push returned {response.status_code}", {})


expo_push_client = ExpoPushClient()
