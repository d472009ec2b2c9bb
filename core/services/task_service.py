"""Task lifecycle: creation, reads, status transitions and reactions.

The requester's uid is always passed in by the caller. Expiry is lazy:
reads and listings reconcile pending tasks whose expiry has passed and
persist the transition as part of the read.
"""

from datetime import datetime, timedelta
from uuid import UUID

from django.db import DatabaseError
from django.utils import timezone

import structlog

from core.constants.task import (
    MAX_EXTENSIONS,
    RUNNING_LATE_EXTENSION,
    TaskErrorMessages,
)
from core.enums import (
    NotificationStatusEnum,
    SortOrder,
    TaskQueryType,
    TaskReaction,
    TaskSortField,
    TaskStatus,
)
from core.exceptions import (
    ForbiddenError,
    InvalidRequestError,
    InvalidStateError,
    InvalidTransitionError,
    LimitExceededError,
    TaskAccessDeniedError,
    TaskNotFoundError,
    UserNotFoundError,
)
from core.expiry import compute_ttl, reconcile_expiry
from core.models import Task
from core.pagination import build_pagination_meta, page_offset
from core.repositories import UserRepository
from core.schemas.task import CreateTaskRequest, PaginationMeta, TaskListQuery
from core.services.notification_dispatch_service import (
    NotificationDispatchService,
    notification_dispatch_service,
)

logger = structlog.get_logger(__name__)

SORT_COLUMNS = {
    TaskSortField.CREATED_AT: "created_at",
    TaskSortField.UPDATED_AT: "updated_at",
    TaskSortField.EXPIRES_AT: "expires_at",
}

ROLE_COLUMNS = {
    TaskQueryType.CREATED: "creator_id",
    TaskQueryType.ASSIGNED: "assignee_id",
}

TERMINAL_STATUS_ERRORS = {
    TaskStatus.EXPIRED.value: (
        TaskErrorMessages.CANNOT_UPDATE_EXPIRED,
        "TASK_EXPIRED",
    ),
    TaskStatus.COMPLETED.value: (
        TaskErrorMessages.ALREADY_COMPLETED,
        "TASK_COMPLETED",
    ),
    TaskStatus.CANCELLED.value: (
        TaskErrorMessages.ALREADY_CANCELLED,
        "TASK_CANCELLED",
    ),
}


class TaskService:
    """Operations on tasks on behalf of an explicit requester."""

    def __init__(self, dispatcher: NotificationDispatchService | None = None):
        self.dispatcher = dispatcher or notification_dispatch_service

    def create_task(self, request: CreateTaskRequest, creator_id: str) -> Task:
        """Create a pending task and notify the assignee.

        The assignment notification is attempted synchronously. Its outcome
        is recorded on the task and never fails the creation.

        Args:
            request: Validated create request
            creator_id: Uid of the requester

        Returns:
            The persisted Task, including the notification outcome

        Raises:
            UserNotFoundError: If the creator or the assignee does not exist
            InvalidRequestError: If the assignee is the creator
        """
        try:
            creator = UserRepository.get_user(creator_id)
        except UserNotFoundError as e:
            raise UserNotFoundError(
                TaskErrorMessages.CREATOR_NOT_FOUND, user_id=creator_id
            ) from e
        assignee = UserRepository.find_user_by_email(request.assign_to_email)

        if assignee.user_id == creator.user_id:
            raise InvalidRequestError(
                TaskErrorMessages.SELF_ASSIGNMENT, error_code="SELF_ASSIGNMENT"
            )

        now = timezone.now()
        expires_at = now + timedelta(minutes=request.duration_minutes)
        task = Task.objects.create(
            title=request.title,
            note=request.note,
            creator_id=creator.user_id,
            creator_email=creator.email,
            creator_name=creator.display_name,
            assignee_id=assignee.user_id,
            assignee_email=assignee.email,
            assignee_name=assignee.display_name,
            status=TaskStatus.PENDING.value,
            assignee_reaction=None,
            expires_at=expires_at,
            duration_minutes=request.duration_minutes,
            notification_sent=False,
            extension_count=0,
            ttl=compute_ttl(expires_at),
            created_at=now,
            updated_at=now,
        )
        logger.info(
            "task_created",
            task_id=str(task.task_id),
            creator_id=creator.user_id,
            assignee_id=assignee.user_id,
            duration_minutes=request.duration_minutes,
        )

        self._dispatch_assignment(task)
        return task

    def _dispatch_assignment(self, task: Task) -> None:
        try:
            notification = self.dispatcher.send_task_assignment_notification(
                task_id=task.task_id,
                assignee_id=task.assignee_id,
                creator_id=task.creator_id,
                creator_name=task.creator_name,
                task_title=task.title,
            )
        except Exception as e:
            logger.error(
                "task_assignment_notification_failed",
                task_id=str(task.task_id),
                error=str(e),
                error_type=type(e).__name__,
            )
            self._record_notification_outcome(task, sent=False, error=str(e))
            return

        if notification is None:
            return
        if notification.status == NotificationStatusEnum.SENT.value:
            self._record_notification_outcome(task, sent=True)
        else:
            self._record_notification_outcome(
                task, sent=False, error=notification.error_message
            )

    @staticmethod
    def _record_notification_outcome(
        task: Task, sent: bool, error: str | None = None
    ) -> None:
        task.notification_sent = sent
        task.notification_sent_at = timezone.now() if sent else None
        task.notification_error = error
        task.save(
            update_fields=[
                "notification_sent",
                "notification_sent_at",
                "notification_error",
            ]
        )

    def get_task(self, task_id: UUID | str, requester_id: str) -> Task:
        """Read a task the requester participates in.

        A pending task found past its expiry is persisted as expired.

        Raises:
            TaskNotFoundError: If the task does not exist
            TaskAccessDeniedError: If the requester is neither creator nor assignee
        """
        task = self._get_task_or_raise(task_id)
        if not task.is_participant(requester_id):
            raise TaskAccessDeniedError(str(task_id), requester_id)

        self._expire_if_due(task, timezone.now())
        return task

    @staticmethod
    def _expire_if_due(task: Task, now: datetime) -> bool:
        if not reconcile_expiry(task, now):
            return False
        Task.objects.filter(
            task_id=task.task_id, status=TaskStatus.PENDING.value
        ).update(status=task.status, updated_at=task.updated_at)
        logger.info("task_expired_on_read", task_id=str(task.task_id))
        return True

    @staticmethod
    def _raise_if_terminal(status: str) -> None:
        if status in TERMINAL_STATUS_ERRORS:
            message, error_code = TERMINAL_STATUS_ERRORS[status]
            raise InvalidTransitionError(message, error_code=error_code)

    def list_tasks(
        self, requester_id: str, query: TaskListQuery
    ) -> tuple[list[Task], PaginationMeta]:
        """List the requester's tasks in one role, one page at a time.

        Tasks found expired are flushed to the store in a single batched
        update. A failure of that write is logged; the returned tasks
        already carry the expired status.

        Args:
            requester_id: Uid of the requester
            query: Role, paging, sorting and filters

        Returns:
            (tasks on the page, pagination metadata)
        """
        role_column = ROLE_COLUMNS[TaskQueryType(query.type)]
        queryset = Task.objects.filter(**{role_column: requester_id})
        if query.status:
            queryset = queryset.filter(status=TaskStatus(query.status).value)
        if query.reaction:
            queryset = queryset.filter(
                assignee_reaction=TaskReaction(query.reaction).value
            )

        total_items = queryset.count()

        sort_column = SORT_COLUMNS[TaskSortField(query.sort_by)]
        if SortOrder(query.sort_order) is SortOrder.DESC:
            sort_column = f"-{sort_column}"
        offset = page_offset(query.page, query.limit)
        tasks = list(
            queryset.order_by(sort_column, "task_id")[offset : offset + query.limit]
        )

        now = timezone.now()
        expired_ids = [task.task_id for task in tasks if reconcile_expiry(task, now)]
        if expired_ids:
            self._flush_expired(expired_ids, now)

        return tasks, build_pagination_meta(total_items, query.page, query.limit)

    @staticmethod
    def _flush_expired(task_ids: list[UUID], now: datetime) -> None:
        try:
            updated = Task.objects.filter(
                task_id__in=task_ids, status=TaskStatus.PENDING.value
            ).update(status=TaskStatus.EXPIRED.value, updated_at=now)
        except DatabaseError as e:
            logger.error(
                "task_expiry_flush_failed",
                task_ids=[str(task_id) for task_id in task_ids],
                error=str(e),
            )
            return
        logger.info("tasks_expired_on_list", count=updated)

    def update_task_status(
        self,
        task_id: UUID | str,
        new_status: TaskStatus | str,
        requester_id: str | None = None,
    ) -> Task:
        """Move a pending task to a new status.

        Without a requester (system-triggered transitions) the role checks
        are skipped; the terminal-status guard always applies. A pending task
        past its expiry is persisted as expired first, so it cannot be
        completed or cancelled late. The write is conditional on the row
        still being pending; a concurrent transition that got there first
        is reported as a terminal-status error.

        Raises:
            TaskNotFoundError: If the task does not exist
            ForbiddenError: If a non-creator cancels or a non-assignee completes
            InvalidTransitionError: If the task is already in a terminal status
        """
        new_status = TaskStatus(new_status)
        task = self._get_task_or_raise(task_id)

        if requester_id is not None:
            if (
                new_status is TaskStatus.CANCELLED
                and task.creator_id != requester_id
            ):
                raise ForbiddenError(TaskErrorMessages.ONLY_CREATOR_CAN_CANCEL)
            if (
                new_status is TaskStatus.COMPLETED
                and task.assignee_id != requester_id
            ):
                raise ForbiddenError(TaskErrorMessages.ONLY_ASSIGNEE_CAN_COMPLETE)

        now = timezone.now()
        if self._expire_if_due(task, now) and new_status is TaskStatus.EXPIRED:
            return task
        self._raise_if_terminal(task.status)

        updated = Task.objects.filter(
            task_id=task.task_id, status=TaskStatus.PENDING.value
        ).update(status=new_status.value, updated_at=now)
        if not updated:
            current = self._get_task_or_raise(task.task_id)
            logger.warning(
                "task_status_update_lost_race",
                task_id=str(task.task_id),
                to_status=new_status.value,
                current_status=current.status,
            )
            self._raise_if_terminal(current.status)

        previous_status = task.status
        task.status = new_status.value
        task.updated_at = now
        logger.info(
            "task_status_updated",
            task_id=str(task.task_id),
            from_status=previous_status,
            to_status=new_status.value,
        )
        return task

    def complete_task(self, task_id: UUID | str, requester_id: str) -> Task:
        """Mark a task completed on behalf of its assignee."""
        return self.update_task_status(task_id, TaskStatus.COMPLETED, requester_id)

    def cancel_task(self, task_id: UUID | str, requester_id: str) -> Task:
        """Cancel a task on behalf of its creator."""
        return self.update_task_status(task_id, TaskStatus.CANCELLED, requester_id)

    def update_task_reaction(
        self,
        task_id: UUID | str,
        reaction: TaskReaction | str,
        requester_id: str,
    ) -> Task:
        """Record the assignee's reaction and notify the creator.

        ``running_late`` pushes the expiry 30 minutes forward, at most
        MAX_EXTENSIONS times. The creator notification is sent after the
        reaction is saved; its failure is logged and not raised.

        Raises:
            TaskNotFoundError: If the task does not exist
            ForbiddenError: If the requester is not the assignee
            InvalidStateError: If the task is not pending
            LimitExceededError: If no extension is left for running_late
        """
        reaction = TaskReaction(reaction)
        task = self._get_task_or_raise(task_id)

        if task.assignee_id != requester_id:
            raise ForbiddenError(TaskErrorMessages.ONLY_ASSIGNEE_CAN_REACT)
        self._expire_if_due(task, timezone.now())
        if task.status != TaskStatus.PENDING.value:
            raise InvalidStateError(
                TaskErrorMessages.CANNOT_REACT, error_code="TASK_NOT_PENDING"
            )

        update_fields = ["assignee_reaction", "updated_at"]
        if reaction is TaskReaction.RUNNING_LATE:
            if task.extension_count >= MAX_EXTENSIONS:
                raise LimitExceededError(
                    TaskErrorMessages.MAX_EXTENSIONS,
                    error_code="MAX_EXTENSIONS_REACHED",
                )
            task.expires_at = task.expires_at + RUNNING_LATE_EXTENSION
            task.ttl = compute_ttl(task.expires_at)
            task.extension_count += 1
            update_fields += ["expires_at", "ttl", "extension_count"]

        task.assignee_reaction = reaction.value
        task.updated_at = timezone.now()
        task.save(update_fields=update_fields)
        logger.info(
            "task_reaction_updated",
            task_id=str(task.task_id),
            reaction=reaction.value,
            extension_count=task.extension_count,
        )

        try:
            self.dispatcher.send_task_reaction_notification(
                task_id=task.task_id,
                creator_id=task.creator_id,
                assignee_id=task.assignee_id,
                assignee_name=task.assignee_name,
                task_title=task.title,
                reaction=reaction.value,
            )
        except Exception as e:
            logger.error(
                "task_reaction_notification_failed",
                task_id=str(task.task_id),
                error=str(e),
                error_type=type(e).__name__,
            )

        return task

    def delete_task(self, task_id: UUID | str, requester_id: str) -> None:
        """Delete a task on behalf of its creator.

        Raises:
            TaskNotFoundError: If the task does not exist
            ForbiddenError: If the requester is not the creator
        """
        task = self._get_task_or_raise(task_id)
        if task.creator_id != requester_id:
            raise ForbiddenError(TaskErrorMessages.ONLY_CREATOR_CAN_DELETE)

        task.delete()
        logger.info("task_deleted", task_id=str(task_id), creator_id=requester_id)

    @staticmethod
    def _get_task_or_raise(task_id: UUID | str) -> Task:
        task = Task.objects.filter(task_id=task_id).first()
        if task is None:
            raise TaskNotFoundError(str(task_id))
        return task


task_service = TaskService()
