"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    LivenessCheckView,
    MarkAllReadView,
    MyTasksView,
    NotificationDetailView,
    NotificationListView,
    NotificationReadView,
    PushTokenView,
    ReadinessCheckView,
    TaskCancelView,
    TaskCompleteView,
    TaskCreateView,
    TaskDetailView,
    TaskReactionView,
    TaskStatusView,
    UnreadCountView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Task endpoints
    path("tasks", TaskCreateView.as_view(), name="task-create"),
    path("tasks/my-tasks", MyTasksView.as_view(), name="task-list"),
    path("tasks/<uuid:task_id>", TaskDetailView.as_view(), name="task-detail"),
    path(
        "tasks/<uuid:task_id>/status",
        TaskStatusView.as_view(),
        name="task-status",
    ),
    path(
        "tasks/<uuid:task_id>/reaction",
        TaskReactionView.as_view(),
        name="task-reaction",
    ),
    path(
        "tasks/<uuid:task_id>/complete",
        TaskCompleteView.as_view(),
        name="task-complete",
    ),
    path(
        "tasks/<uuid:task_id>/cancel",
        TaskCancelView.as_view(),
        name="task-cancel",
    ),
    # Notification endpoints
    path("notifications", NotificationListView.as_view(), name="notification-list"),
    path(
        "notifications/unread-count",
        UnreadCountView.as_view(),
        name="notification-unread-count",
    ),
    path(
        "notifications/read-all",
        MarkAllReadView.as_view(),
        name="notification-read-all",
    ),
    path(
        "notifications/<uuid:notification_id>",
        NotificationDetailView.as_view(),
        name="notification-detail",
    ),
    path(
        "notifications/<uuid:notification_id>/read",
        NotificationReadView.as_view(),
        name="notification-read",
    ),
    # User endpoints
    path("users/me/push-token", PushTokenView.as_view(), name="user-push-token"),
]
