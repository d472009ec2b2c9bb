"""Notification dispatch and retention constants."""

DEFAULT_NOTIFICATION_LIMIT = 50
MIN_NOTIFICATION_LIMIT = 1
MAX_NOTIFICATION_LIMIT = 100

RETENTION_DAYS = 30
CLEANUP_BATCH_SIZE = 500

PUSH_CHANNEL_ID = "task_notifications"
PUSH_SOUND = "default"
PUSH_PRIORITY = "high"

# Failure reasons recorded on notification rows when delivery is not attempted
USER_NOT_FOUND_REASON = "User not found"
MISSING_PUSH_TOKEN_REASON = (
    "User has no push token - needs to login to enable notifications"
)
INVALID_PUSH_TOKEN_REASON = "Invalid Expo push token format"
UNKNOWN_PROVIDER_ERROR = "Unknown Expo error"
UNKNOWN_MESSAGE_ID = "unknown"
