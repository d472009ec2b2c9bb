"""Query parameters for listing the requester's notifications."""

from uuid import UUID

from pydantic import Field

from core.constants.notification import (
    DEFAULT_NOTIFICATION_LIMIT,
    MAX_NOTIFICATION_LIMIT,
    MIN_NOTIFICATION_LIMIT,
)
from core.enums import NotificationType
from core.schemas.base_schema_model import BaseSchemaModel


class NotificationListQuery(BaseSchemaModel):
    """Query string of GET /notifications."""

    limit: int = Field(
        DEFAULT_NOTIFICATION_LIMIT,
        ge=MIN_NOTIFICATION_LIMIT,
        le=MAX_NOTIFICATION_LIMIT,
    )
    unread_only: bool = False
    type: NotificationType | None = None
    cursor: UUID | None = Field(
        None, description="Id of the last notification of the previous page"
    )
