"""User model."""

from typing import ClassVar

from django.db import models


class User(models.Model):
    """User profile row maintained by the identity service.

    This model is unmanaged as the database schema is owned by another
    service. The task service only reads profiles and registers push tokens.

    Attributes:
        user_id: Identity-provider uid.
        email: Lower-cased email address, used to look up assignees.
        name: Display name shown in task payloads and notification titles.
        push_token: Expo push token of the user's current device, if any.
        push_token_updated_at: When the push token was last registered.
    """

    user_id = models.CharField(primary_key=True, max_length=128)
    email = models.EmailField(max_length=255, unique=True)
    name = models.CharField(max_length=255, default="", blank=True)
    push_token = models.CharField(max_length=255, null=True, blank=True)
    push_token_updated_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.name} ({self.email})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(user_id={self.user_id}, email='{self.email}')>"

    @property
    def display_name(self) -> str:
        """Name to show in task payloads, never empty."""
        return self.name or "Unknown"
