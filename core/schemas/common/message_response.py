"""Schema for responses that only carry a message."""

from core.schemas.base_schema_model import BaseSchemaModel


class MessageResponse(BaseSchemaModel):
    """``{"message": ...}``."""

    message: str
