"""OAuth2 bearer-token authentication for Django REST Framework.

Tokens are validated in one of two ways, selected by settings:

1. Introspection against the auth service (OAUTH2_INTROSPECTION_ENABLED),
   with results cached for OAUTH2_TOKEN_CACHE_TTL seconds.
2. Local verification of an HS-signed JWT using JWT_SECRET.

The authenticated uid is exposed as ``request.user.user_id``; views pass it
to the services explicitly.
"""

from typing import Any, cast

from django.conf import settings
from django.core.cache import cache

import jwt
import requests
import structlog
from rest_framework import authentication, exceptions

from core.logging.context import set_user_id

logger = structlog.get_logger(__name__)

JWT_ALGORITHMS = ["HS256", "HS384", "HS512"]
ACCESS_TOKEN_TYPE = "access_token"
INTROSPECTION_TIMEOUT = 5


class OAuth2User:
    """Authenticated principal built from token claims.

    Not a Django model; the users table is read through UserRepository.
    """

    def __init__(self, user_id: str, client_id: str, scopes: list[str]):
        self.id = user_id
        self.user_id = user_id
        self.client_id = client_id
        self.scopes = scopes
        self.is_authenticated = True

    def has_scope(self, scope: str) -> bool:
        """Return True if the token granted ``scope``."""
        return scope in self.scopes

    def __str__(self):
        return f"OAuth2User(user_id={self.user_id}, client_id={self.client_id})"


class OAuth2Authentication(authentication.BaseAuthentication):
    """Authenticate requests carrying ``Authorization: Bearer <token>``."""

    def authenticate(self, request):
        """Authenticate the request.

        Args:
            request: DRF request

        Returns:
            (OAuth2User, token) on success, None when no credentials were sent

        Raises:
            AuthenticationFailed: Malformed header, invalid token or a token
                without a subject
        """
        if not settings.OAUTH2_SERVICE_ENABLED:
            return None

        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise exceptions.AuthenticationFailed("Invalid authorization header format")

        token = parts[1]
        if settings.OAUTH2_INTROSPECTION_ENABLED:
            claims = self._validate_via_introspection(token)
        else:
            claims = self._validate_via_jwt(token)

        user_id = claims.get("sub") or claims.get("user_id")
        if not user_id:
            logger.warning("token_missing_subject", client_id=claims.get("client_id"))
            raise exceptions.AuthenticationFailed("Token has no subject")

        set_user_id(user_id)
        user = OAuth2User(
            user_id=user_id,
            client_id=claims.get("client_id") or "unknown",
            scopes=claims.get("scopes") or [],
        )
        return (user, token)

    def _validate_via_introspection(self, token: str) -> dict[str, Any]:
        cache_key = f"{settings.OAUTH2_TOKEN_CACHE_PREFIX}{token[:16]}"
        cached = cache.get(cache_key)
        if cached:
            return cast("dict[str, Any]", cached)

        try:
            response = requests.post(
                settings.OAUTH2_INTROSPECT_URL,
                data={"token": token, "token_type_hint": ACCESS_TOKEN_TYPE},
                auth=(settings.OAUTH2_CLIENT_ID, settings.OAUTH2_CLIENT_SECRET),
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=INTROSPECTION_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.error("token_introspection_unreachable", error=str(e))
            raise exceptions.AuthenticationFailed(
                "Token validation service unavailable"
            ) from e

        if response.status_code != 200:
            logger.warning(
                "token_introspection_failed", status_code=response.status_code
            )
            raise exceptions.AuthenticationFailed("Token introspection failed")

        data = response.json()
        if not data.get("active", False):
            raise exceptions.AuthenticationFailed("Token is not active")

        cache.set(cache_key, data, timeout=settings.OAUTH2_TOKEN_CACHE_TTL)
        return cast("dict[str, Any]", data)

    def _validate_via_jwt(self, token: str) -> dict[str, Any]:
        if not settings.JWT_SECRET:
            logger.error("jwt_secret_not_configured")
            raise exceptions.AuthenticationFailed("JWT validation not configured")

        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=JWT_ALGORITHMS,
                options={"verify_signature": True, "verify_exp": True},
            )
        except jwt.ExpiredSignatureError as e:
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("invalid_jwt", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

        token_type = payload.get("type", ACCESS_TOKEN_TYPE)
        if token_type != ACCESS_TOKEN_TYPE:
            logger.warning("invalid_token_type", token_type=token_type)
            raise exceptions.AuthenticationFailed(f"Invalid token type: {token_type}")

        return cast("dict[str, Any]", payload)

    def authenticate_header(self, _request):
        """Return the WWW-Authenticate value so 401s are emitted, not 403s."""
        return "Bearer"
