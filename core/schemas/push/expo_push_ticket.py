"""Schema for a push ticket returned by the Expo push API."""

from typing import Any, Literal

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ExpoPushTicket(BaseSchemaModel):
    """Per-message result of a send request.

    ``status`` is "ok" with a ticket ``id``, or "error" with a ``message``
    and provider ``details`` such as ``{"error": "DeviceNotRegistered"}``.
    """

    status: Literal["ok", "error"]
    id: str | None = None
    message: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        """Whether the provider rejected the message."""
        return self.status == "error"
