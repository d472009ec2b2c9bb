"""Root URL configuration for the task alert service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/", include("core.urls")),
]
