"""User schemas."""

from core.schemas.user.push_token_request import PushTokenRequest

__all__ = ["PushTokenRequest"]
