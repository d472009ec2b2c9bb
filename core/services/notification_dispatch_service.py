"""Notification dispatch for task lifecycle events.

Turns lifecycle events into notification rows and attempts a single push
delivery per row. Expected gaps (unknown recipient, no registered device,
malformed token) are recorded on the row as ``failed`` and return normally.
Provider rejections are recorded the same way and then raised as
PushDeliveryError so the caller decides whether to surface them.

Also serves the recipient-facing inbox: listing, unread counts, read
markers, deletion and the retention cleanup.
"""

from datetime import timedelta
from typing import Any
from uuid import UUID

from django.db.models import Q
from django.utils import timezone

import structlog

from core.constants.notification import (
    CLEANUP_BATCH_SIZE,
    DEFAULT_NOTIFICATION_LIMIT,
    INVALID_PUSH_TOKEN_REASON,
    MISSING_PUSH_TOKEN_REASON,
    RETENTION_DAYS,
    USER_NOT_FOUND_REASON,
)
from core.enums import NotificationStatusEnum, NotificationType
from core.exceptions import (
    ForbiddenError,
    NotificationNotFoundError,
    PushDeliveryError,
)
from core.models import Notification
from core.repositories import UserRepository
from core.schemas.notification import (
    NotificationListQuery,
    NotificationListResponse,
    NotificationPageInfo,
    NotificationResponse,
)
from core.services.downstream import (
    ExpoPushClient,
    expo_push_client,
    is_expo_push_token,
)

logger = structlog.get_logger(__name__)


class NotificationDispatchService:
    """Creates notification rows and delivers them as push messages."""

    def __init__(self, push_client: ExpoPushClient | None = None):
        self.push_client = push_client or expo_push_client

    # Dispatch

    def send_task_assignment_notification(
        self,
        task_id: UUID | str,
        assignee_id: str,
        creator_id: str,
        creator_name: str,
        task_title: str,
    ) -> Notification | None:
        """Notify the assignee that a task was assigned to them.

        At most one assignment notification exists per (task, assignee);
        repeated calls return None without touching the store.

        Returns:
            The notification row, or None when one already existed

        Raises:
            PushDeliveryError: If the push provider rejected the message
        """
        return self._send_push_notification(
            task_id=task_id,
            recipient_id=assignee_id,
            sender_id=creator_id,
            notification_type=NotificationType.TASK_ASSIGNED,
            title=f"New task from {creator_name}",
            body=task_title,
        )

    def send_task_reaction_notification(
        self,
        task_id: UUID | str,
        creator_id: str,
        assignee_id: str,
        assignee_name: str,
        task_title: str,
        reaction: str,
    ) -> Notification | None:
        """Notify the creator that the assignee reacted to a task.

        Raises:
            PushDeliveryError: If the push provider rejected the message
        """
        reaction_text = reaction.replace("_", " ")
        return self._send_push_notification(
            task_id=task_id,
            recipient_id=creator_id,
            sender_id=assignee_id,
            notification_type=NotificationType.TASK_REACTION,
            title=f"{assignee_name} responded",
            body=f'"{reaction_text}" on: {task_title}',
        )

    def _send_push_notification(
        self,
        task_id: UUID | str,
        recipient_id: str,
        sender_id: str,
        notification_type: NotificationType,
        title: str,
        body: str,
    ) -> Notification | None:
        log = logger.bind(
            task_id=str(task_id),
            recipient_id=recipient_id,
            notification_type=notification_type.value,
        )

        if (
            notification_type is NotificationType.TASK_ASSIGNED
            and self._notification_exists(task_id, recipient_id, notification_type)
        ):
            log.warning("notification_already_exists")
            return None

        notification = Notification.objects.create(
            notification_type=notification_type.value,
            recipient_id=recipient_id,
            sender_id=sender_id,
            task_id=task_id,
            title=title,
            body=body,
            data={"taskId": str(task_id), "type": notification_type.value},
            status=NotificationStatusEnum.PENDING.value,
        )
        log = log.bind(notification_id=str(notification.notification_id))
        log.info("notification_created")

        recipient = UserRepository.get_user_or_none(recipient_id)
        if recipient is None:
            log.error("notification_recipient_not_found")
            notification.mark_failed(USER_NOT_FOUND_REASON)
            return notification

        if not recipient.push_token:
            log.warning(
                "notification_recipient_has_no_push_token",
                recipient=recipient.name or recipient.email or recipient_id,
            )
            notification.mark_failed(MISSING_PUSH_TOKEN_REASON)
            return notification

        if not is_expo_push_token(recipient.push_token):
            log.warning("notification_invalid_push_token")
            notification.mark_failed(INVALID_PUSH_TOKEN_REASON)
            return notification

        payload: dict[str, Any] = {
            "notificationId": str(notification.notification_id),
            **notification.data,
        }
        try:
            message_id = self.push_client.send(
                token=recipient.push_token,
                title=title,
                body=body,
                data=payload,
            )
        except PushDeliveryError as e:
            log.error("notification_delivery_failed", error=str(e), details=e.details)
            notification.mark_failed(str(e))
            raise
        except Exception as e:
            log.exception("notification_delivery_error", error_type=type(e).__name__)
            notification.mark_failed(str(e) or type(e).__name__)
            raise

        notification.mark_sent(message_id)
        log.info("notification_sent", provider_message_id=message_id)
        return notification

    @staticmethod
    def _notification_exists(
        task_id: UUID | str, recipient_id: str, notification_type: NotificationType
    ) -> bool:
        return Notification.objects.filter(
            task_id=task_id,
            recipient_id=recipient_id,
            notification_type=notification_type.value,
        ).exists()

    # Inbox

    def get_user_notifications(
        self,
        recipient_id: str,
        query: NotificationListQuery | None = None,
    ) -> NotificationListResponse:
        """List a recipient's notifications, newest first.

        Pagination is by cursor: pass the ``next_cursor`` of the previous page
        to continue after it. An unknown cursor starts from the top.

        Args:
            recipient_id: Uid of the recipient
            query: Limit, unread-only flag, type filter and cursor

        Returns:
            NotificationListResponse
        """
        query = query or NotificationListQuery(limit=DEFAULT_NOTIFICATION_LIMIT)

        queryset = Notification.objects.filter(recipient_id=recipient_id)
        if query.unread_only:
            queryset = queryset.filter(is_read=False)
        if query.type:
            queryset = queryset.filter(notification_type=query.type)

        total = queryset.count()
        queryset = queryset.order_by("-created_at", "-notification_id")

        if query.cursor:
            anchor = (
                Notification.objects.filter(notification_id=query.cursor)
                .values("created_at", "notification_id")
                .first()
            )
            if anchor is not None:
                queryset = queryset.filter(
                    Q(created_at__lt=anchor["created_at"])
                    | Q(
                        created_at=anchor["created_at"],
                        notification_id__lt=anchor["notification_id"],
                    )
                )

        rows = list(queryset[: query.limit + 1])
        has_more = len(rows) > query.limit
        rows = rows[: query.limit]
        next_cursor = str(rows[-1].notification_id) if has_more and rows else None

        return NotificationListResponse(
            notifications=[NotificationResponse.from_notification(n) for n in rows],
            pagination=NotificationPageInfo(
                total=total,
                count=len(rows),
                limit=query.limit,
                has_more=has_more,
                next_cursor=next_cursor,
            ),
        )

    def get_notification(
        self, notification_id: UUID | str, recipient_id: str
    ) -> Notification:
        """Fetch one notification owned by ``recipient_id``.

        Raises:
            NotificationNotFoundError: If absent or owned by someone else
        """
        notification = Notification.objects.filter(
            notification_id=notification_id, recipient_id=recipient_id
        ).first()
        if notification is None:
            raise NotificationNotFoundError(str(notification_id))
        return notification

    def get_unread_count(self, recipient_id: str) -> int:
        """Number of unread notifications of ``recipient_id``."""
        return Notification.objects.filter(
            recipient_id=recipient_id, is_read=False
        ).count()

    def mark_as_read(
        self, notification_id: UUID | str, recipient_id: str
    ) -> Notification:
        """Mark one notification as read.

        Raises:
            NotificationNotFoundError: If absent or owned by someone else
        """
        notification = self.get_notification(notification_id, recipient_id)
        notification.mark_read()
        logger.info(
            "notification_marked_as_read",
            notification_id=str(notification_id),
            recipient_id=recipient_id,
        )
        return notification

    def mark_all_as_read(self, recipient_id: str) -> int:
        """Mark every unread notification of ``recipient_id`` as read.

        Returns:
            Number of notifications updated
        """
        updated = Notification.objects.filter(
            recipient_id=recipient_id, is_read=False
        ).update(
            is_read=True,
            read_at=timezone.now(),
            status=NotificationStatusEnum.READ.value,
        )
        logger.info(
            "all_notifications_marked_as_read",
            recipient_id=recipient_id,
            count=updated,
        )
        return updated

    def delete_notification(
        self, notification_id: UUID | str, recipient_id: str
    ) -> None:
        """Delete a notification owned by ``recipient_id``.

        Raises:
            NotificationNotFoundError: If the notification does not exist
            ForbiddenError: If it belongs to another user
        """
        notification = Notification.objects.filter(
            notification_id=notification_id
        ).first()
        if notification is None:
            raise NotificationNotFoundError(str(notification_id))
        if notification.recipient_id != recipient_id:
            logger.warning(
                "notification_delete_forbidden",
                notification_id=str(notification_id),
                recipient_id=recipient_id,
            )
            raise ForbiddenError("You cannot delete this notification")

        notification.delete()
        logger.info(
            "notification_deleted",
            notification_id=str(notification_id),
            recipient_id=recipient_id,
        )

    def delete_old_notifications(self, days: int = RETENTION_DAYS) -> int:
        """Delete notifications created more than ``days`` days ago.

        Rows are removed in chunks of CLEANUP_BATCH_SIZE ids.

        Returns:
            Number of notifications deleted
        """
        cutoff = timezone.now() - timedelta(days=days)
        stale_ids = list(
            Notification.objects.filter(created_at__lt=cutoff).values_list(
                "notification_id", flat=True
            )
        )

        deleted_count = 0
        for start in range(0, len(stale_ids), CLEANUP_BATCH_SIZE):
            chunk = stale_ids[start : start + CLEANUP_BATCH_SIZE]
            deleted, _ = Notification.objects.filter(notification_id__in=chunk).delete()
            deleted_count += deleted

        logger.info(
            "old_notifications_deleted",
            retention_days=days,
            deleted_count=deleted_count,
        )
        return deleted_count


notification_dispatch_service = NotificationDispatchService()
