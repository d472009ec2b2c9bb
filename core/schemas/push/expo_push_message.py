"""Schema for a message submitted to the Expo push API."""

from typing import Any

from pydantic import Field

from core.constants.notification import PUSH_CHANNEL_ID, PUSH_PRIORITY, PUSH_SOUND
from core.schemas.base_schema_model import BaseSchemaModel


class ExpoPushMessage(BaseSchemaModel):
    """One push message; serialised with camelCase keys (``channelId``)."""

    to: str
    title: str
    body: str
    data: dict[str, Any] = Field(default_factory=dict)
    sound: str = PUSH_SOUND
    priority: str = PUSH_PRIORITY
    channel_id: str = PUSH_CHANNEL_ID
