"""Request schema for registering a device push token."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class PushTokenRequest(BaseSchemaModel):
    """Request body for PUT /users/me/push-token.

    A null token unregisters the current device.
    """

    push_token: str | None = Field(None, max_length=255)
