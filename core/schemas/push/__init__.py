"""Push provider schemas."""

from core.schemas.push.expo_push_message import ExpoPushMessage
from core.schemas.push.expo_push_ticket import ExpoPushTicket

__all__ = ["ExpoPushMessage", "ExpoPushTicket"]
