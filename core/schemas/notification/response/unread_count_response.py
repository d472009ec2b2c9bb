"""Schema for the unread notification counter."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UnreadCountResponse(BaseSchemaModel):
    """Number of unread notifications of the requester."""

    count: int = Field(..., ge=0)
