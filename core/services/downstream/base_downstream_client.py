"""Base client for downstream HTTP services."""

from typing import Any

import requests
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 10


class BaseDownstreamClient:
    """Base class for downstream service HTTP clients.

    Subclasses build payloads and map error statuses onto their own
    exceptions; this class owns headers, timeouts and request logging.
    """

    def __init__(
        self,
        service_name: str,
        base_url: str,
        access_token: str | None = None,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """Initialize base downstream client.

        Args:
            service_name: Name of the downstream service (for logging/errors)
            base_url: Base URL for the service
            access_token: Optional bearer token sent with every request
            timeout: Request timeout in seconds
        """
        self.service_name = service_name
        self.base_url = base_url
        self.access_token = access_token
        self.timeout = timeout

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _handle_error_response(self, response: requests.Response) -> None:
        """Translate an error status (>= 400) into the client's exception.

        Raises:
            DownstreamServiceError: Or a subclass chosen by the client
        """
        raise NotImplementedError

    def _make_request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json_data: Any = None,
        **kwargs,
    ) -> requests.Response:
        """Make an HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Full URL for the request
            params: Query parameters
            json_data: JSON body data
            **kwargs: Additional arguments to pass to requests

        Returns:
            Response object with a status below 400

        Raises:
            DownstreamServiceError: For error statuses (see _handle_error_response)
            requests.Timeout: For timeout errors
            requests.ConnectionError: For connection errors
            requests.RequestException: For any other transport failure
        """
        headers = self._get_headers()
        if "headers" in kwargs:
            headers.update(kwargs.pop("headers"))
        kwargs.setdefault("timeout", self.timeout)

        logger.debug(
            "downstream_request",
            service=self.service_name,
            method=method,
            url=url,
        )

        try:
            response = requests.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json_data,
                **kwargs,
            )
        except requests.Timeout:
            logger.error(
                "downstream_request_timeout",
                service=self.service_name,
                method=method,
                url=url,
                timeout=kwargs["timeout"],
            )
            raise
        except requests.ConnectionError as e:
            logger.error(
                "downstream_connection_failed",
                service=self.service_name,
                method=method,
                url=url,
                error=str(e),
            )
            raise
        except requests.RequestException as e:
            logger.error(
                "downstream_request_failed",
                service=self.service_name,
                method=method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        logger.debug(
            "downstream_response",
            service=self.service_name,
            status_code=response.status_code,
        )

        if response.status_code >= 400:
            logger.error(
                "downstream_error_response",
                service=self.service_name,
                status_code=response.status_code,
                response_text=response.text[:500],
            )
            self._handle_error_response(response)

        return response
