"""Repository for queries against the externally owned users table."""

from django.utils import timezone

from core.constants.task import TaskErrorMessages
from core.exceptions import UserNotFoundError
from core.models import User


class UserRepository:
    """User lookups used by the task and notification services.

    Emails are stored lower case by the identity service, so lookups
    normalise their input the same way.
    """

    @staticmethod
    def get_user(user_id: str) -> User:
        """Fetch a user by uid.

        Args:
            user_id: Identity-provider uid

        Returns:
            The matching User

        Raises:
            UserNotFoundError: If no user has this uid
        """
        try:
            return User.objects.get(user_id=user_id)
        except User.DoesNotExist as e:
            raise UserNotFoundError("User not found", user_id=user_id) from e

    @staticmethod
    def get_user_or_none(user_id: str) -> User | None:
        """Fetch a user by uid, returning None when absent."""
        return User.objects.filter(user_id=user_id).first()

    @staticmethod
    def find_user_by_email(email: str) -> User:
        """Fetch a user by email, case-insensitively.

        Args:
            email: Email address as entered by the client

        Returns:
            The matching User

        Raises:
            UserNotFoundError: If no user has this email
        """
        normalized = email.strip().lower()
        user = User.objects.filter(email=normalized).first()
        if user is None:
            raise UserNotFoundError(
                TaskErrorMessages.assignee_not_found(normalized), user_id=normalized
            )
        return user

    @staticmethod
    def update_push_token(user_id: str, push_token: str | None) -> User:
        """Register (or clear) the device push token of a user.

        Only the token columns and updated_at are written.

        Raises:
            UserNotFoundError: If no user has this uid
        """
        user = UserRepository.get_user(user_id)
        now = timezone.now()
        user.push_token = push_token
        user.push_token_updated_at = now
        user.updated_at = now
        user.save(update_fields=["push_token", "push_token_updated_at", "updated_at"])
        return user
