"""Downstream service clients package."""

from core.services.downstream.base_downstream_client import BaseDownstreamClient
from core.services.downstream.expo_push_client import (
    ExpoPushClient,
    expo_push_client,
    is_expo_push_token,
)

__all__ = [
    "BaseDownstreamClient",
    "ExpoPushClient",
    "expo_push_client",
    "is_expo_push_token",
]
