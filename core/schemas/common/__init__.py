"""Schemas shared across resources."""

from core.schemas.common.message_response import MessageResponse

__all__ = ["MessageResponse"]
