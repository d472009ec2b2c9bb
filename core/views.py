"""API views for the task alert service.

Views parse input with pydantic schemas, call the services with the
authenticated uid and serialise the result. Domain errors raised by the
services are rendered by core.exceptions.handlers.custom_exception_handler.
"""

from django.utils import timezone

import structlog
from pydantic import BaseModel, ValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.auth.oauth2 import OAuth2Authentication
from core.constants.task import TaskSuccessMessages
from core.enums import TaskReaction
from core.repositories import UserRepository
from core.schemas import (
    CreateTaskRequest,
    MessageResponse,
    NotificationListQuery,
    NotificationResponse,
    PushTokenRequest,
    TaskEnvelope,
    TaskListQuery,
    TaskListResponse,
    TaskResponse,
    UnreadCountResponse,
    UpdateTaskReactionRequest,
    UpdateTaskStatusRequest,
)
from core.services import health_service
from core.services.notification_dispatch_service import (
    notification_dispatch_service,
)
from core.services.task_service import task_service

logger = structlog.get_logger(__name__)


def _json(schema: BaseModel, status_code: int = status.HTTP_200_OK) -> Response:
    return Response(schema.model_dump(mode="json", by_alias=True), status=status_code)


def _validation_error_response(error: ValidationError) -> Response:
    return Response(
        {
            "error": "bad_request",
            "message": "Invalid request parameters",
            "errors": error.errors(include_url=False, include_context=False),
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def _task_envelope(task, message: str | None = None) -> Response:
    return _json(
        TaskEnvelope(task=TaskResponse.from_task(task, timezone.now()), message=message)
    )


class AuthenticatedAPIView(APIView):
    """Base view requiring an OAuth2 bearer token."""

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)


class LivenessCheckView(APIView):
    """Liveness probe. Exempt from authentication."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Return 200 while the process is alive."""
        return _json(health_service.get_liveness_status())


class ReadinessCheckView(APIView):
    """Readiness probe. Exempt from authentication.

    Returns 503 when the database is unreachable so the pod is taken out
    of rotation.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Report dependency health."""
        readiness = health_service.get_readiness_status()
        status_code = (
            status.HTTP_200_OK
            if readiness.ready
            else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        return _json(readiness, status_code)


class TaskCreateView(AuthenticatedAPIView):
    """POST /tasks: create a task and notify the assignee."""

    def post(self, request):
        """Create a task assigned to ``assignToEmail``.

        Returns:
            201 with the task, including the assignment notification outcome
            400 if the body is invalid or the task is self-assigned
            404 if the creator or assignee does not exist
        """
        try:
            create_request = CreateTaskRequest.model_validate(request.data)
        except ValidationError as e:
            logger.warning("invalid_create_task_request", errors=e.error_count())
            return _validation_error_response(e)

        task = task_service.create_task(create_request, creator_id=request.user.user_id)
        return _json(
            TaskEnvelope(
                task=TaskResponse.from_task(task, timezone.now()),
                message=TaskSuccessMessages.TASK_CREATED,
            ),
            status.HTTP_201_CREATED,
        )


class MyTasksView(AuthenticatedAPIView):
    """GET /tasks/my-tasks: page through created or assigned tasks."""

    def get(self, request):
        """List the requester's tasks.

        Query parameters: type (required), page, limit, sortBy, sortOrder,
        status, reaction.
        """
        try:
            query = TaskListQuery.model_validate(request.query_params.dict())
        except ValidationError as e:
            return _validation_error_response(e)

        tasks, meta = task_service.list_tasks(request.user.user_id, query)
        now = timezone.now()
        return _json(
            TaskListResponse(
                items=[TaskResponse.from_task(task, now) for task in tasks],
                meta=meta,
                message=TaskSuccessMessages.TASKS_RETRIEVED,
            )
        )


class TaskDetailView(AuthenticatedAPIView):
    """GET and DELETE /tasks/{id}."""

    def get(self, request, task_id):
        """Return a task the requester participates in."""
        task = task_service.get_task(task_id, request.user.user_id)
        return _task_envelope(task)

    def delete(self, request, task_id):
        """Delete a task; creator only."""
        task_service.delete_task(task_id, request.user.user_id)
        return _json(MessageResponse(message=TaskSuccessMessages.TASK_DELETED))


class TaskStatusView(AuthenticatedAPIView):
    """PATCH /tasks/{id}/status."""

    def patch(self, request, task_id):
        """Move the task to the requested status."""
        try:
            status_request = UpdateTaskStatusRequest.model_validate(request.data)
        except ValidationError as e:
            return _validation_error_response(e)

        task = task_service.update_task_status(
            task_id, status_request.status, request.user.user_id
        )
        return _task_envelope(task, TaskSuccessMessages.STATUS_UPDATED)


class TaskReactionView(AuthenticatedAPIView):
    """PATCH /tasks/{id}/reaction."""

    def patch(self, request, task_id):
        """Record the assignee's reaction."""
        try:
            reaction_request = UpdateTaskReactionRequest.model_validate(request.data)
        except ValidationError as e:
            return _validation_error_response(e)

        task = task_service.update_task_reaction(
            task_id, reaction_request.reaction, request.user.user_id
        )
        message = (
            TaskSuccessMessages.TIME_EXTENDED
            if reaction_request.reaction == TaskReaction.RUNNING_LATE.value
            else TaskSuccessMessages.REACTION_UPDATED
        )
        return _task_envelope(task, message)


class TaskCompleteView(AuthenticatedAPIView):
    """PATCH /tasks/{id}/complete."""

    def patch(self, request, task_id):
        """Complete the task; assignee only."""
        task = task_service.complete_task(task_id, request.user.user_id)
        return _task_envelope(task, TaskSuccessMessages.TASK_COMPLETED)


class TaskCancelView(AuthenticatedAPIView):
    """PATCH /tasks/{id}/cancel."""

    def patch(self, request, task_id):
        """Cancel the task; creator only."""
        task = task_service.cancel_task(task_id, request.user.user_id)
        return _task_envelope(task, TaskSuccessMessages.TASK_CANCELLED)


class NotificationListView(AuthenticatedAPIView):
    """GET /notifications: the requester's inbox, newest first."""

    def get(self, request):
        """List notifications.

        Query parameters: limit, unreadOnly, type, cursor.
        """
        try:
            query = NotificationListQuery.model_validate(request.query_params.dict())
        except ValidationError as e:
            return _validation_error_response(e)

        page = notification_dispatch_service.get_user_notifications(
            request.user.user_id, query
        )
        return _json(page)


class UnreadCountView(AuthenticatedAPIView):
    """GET /notifications/unread-count."""

    def get(self, request):
        """Return the number of unread notifications."""
        count = notification_dispatch_service.get_unread_count(request.user.user_id)
        return _json(UnreadCountResponse(count=count))


class MarkAllReadView(AuthenticatedAPIView):
    """PATCH /notifications/read-all."""

    def patch(self, request):
        """Mark every unread notification as read."""
        updated = notification_dispatch_service.mark_all_as_read(request.user.user_id)
        message = (
            f"Marked {updated} notifications as read"
            if updated
            else "No unread notifications"
        )
        return _json(MessageResponse(message=message))


class NotificationDetailView(AuthenticatedAPIView):
    """GET and DELETE /notifications/{id}."""

    def get(self, request, notification_id):
        """Return one of the requester's notifications."""
        notification = notification_dispatch_service.get_notification(
            notification_id, request.user.user_id
        )
        return _json(NotificationResponse.from_notification(notification))

    def delete(self, request, notification_id):
        """Delete one of the requester's notifications."""
        notification_dispatch_service.delete_notification(
            notification_id, request.user.user_id
        )
        return _json(MessageResponse(message="Notification deleted"))


class NotificationReadView(AuthenticatedAPIView):
    """PATCH /notifications/{id}/read."""

    def patch(self, request, notification_id):
        """Mark one notification as read."""
        notification_dispatch_service.mark_as_read(
            notification_id, request.user.user_id
        )
        return _json(MessageResponse(message="Notification marked as read"))


class PushTokenView(AuthenticatedAPIView):
    """PUT /users/me/push-token: register the current device."""

    def put(self, request):
        """Store (or clear) the requester's Expo push token."""
        try:
            token_request = PushTokenRequest.model_validate(request.data)
        except ValidationError as e:
            return _validation_error_response(e)

        UserRepository.update_push_token(
            request.user.user_id, token_request.push_token
        )
        logger.info(
            "push_token_updated",
            user_id=request.user.user_id,
            registered=token_request.push_token is not None,
        )
        return _json(MessageResponse(message="Push token updated"))
