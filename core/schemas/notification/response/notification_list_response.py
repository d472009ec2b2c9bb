"""Schema for cursor-paginated notification lists."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.notification.response.notification_response import (
    NotificationResponse,
)


class NotificationPageInfo(BaseSchemaModel):
    """Cursor pagination metadata.

    ``next_cursor`` is the id of the last notification on this page and is
    only set when more notifications follow.
    """

    total: int = Field(..., ge=0, description="Notifications matching the filters")
    count: int = Field(..., ge=0, description="Notifications on this page")
    limit: int = Field(..., ge=1)
    has_more: bool
    next_cursor: str | None = None


class NotificationListResponse(BaseSchemaModel):
    """Page of notifications."""

    notifications: list[NotificationResponse]
    pagination: NotificationPageInfo
