"""Authentication backends for the task alert API."""

from core.auth.oauth2 import OAuth2Authentication, OAuth2User

__all__ = ["OAuth2Authentication", "OAuth2User"]
