"""Data-access helpers over the platform database."""

from core.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
