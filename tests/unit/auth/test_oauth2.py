"""Unit tests for OAuth2 bearer authentication."""

import time

from django.core.cache import cache
from django.test import RequestFactory, SimpleTestCase, override_settings

import jwt
import requests
import responses
from rest_framework import exceptions

from core.auth.oauth2 import OAuth2Authentication, OAuth2User
from core.logging.context import clear_request_context, get_user_id

INTROSPECT_URL = "https://auth.test/oauth2/introspect"


def _jwt(secret="test-jwt-secret", **claims):
    payload = {"sub": "uid-1", "client_id": "mobile-app", "exp": time.time() + 60}
    payload.update(claims)
    payload = {key: value for key, value in payload.items() if value is not None}
    return jwt.encode(payload, secret, algorithm="HS256")


class TestOAuth2User(SimpleTestCase):
    """Test cases for OAuth2User."""

    def test_exposes_user_id_and_scopes(self):
        """Test the principal carries uid and scopes."""
        user = OAuth2User(user_id="uid-1", client_id="app", scopes=["tasks:write"])

        self.assertTrue(user.is_authenticated)
        self.assertEqual(user.id, "uid-1")
        self.assertTrue(user.has_scope("tasks:write"))
        self.assertFalse(user.has_scope("admin"))


class TestOAuth2AuthenticationJWT(SimpleTestCase):
    """Test cases for local JWT validation."""

    def setUp(self):
        """Set up test fixtures."""
        self.auth = OAuth2Authentication()
        self.factory = RequestFactory()

    def tearDown(self):
        """Clear the logging context set by authenticate."""
        clear_request_context()

    def _request(self, header=None):
        extra = {"HTTP_AUTHORIZATION": header} if header else {}
        return self.factory.get("/api/v1/tasks/my-tasks", **extra)

    def test_no_header_returns_none(self):
        """Test anonymous requests are left to the permission classes."""
        self.assertIsNone(self.auth.authenticate(self._request()))

    def test_valid_token(self):
        """Test a valid access token authenticates its subject."""
        token = _jwt(scopes=["tasks:read"])

        user, returned_token = self.auth.authenticate(self._request(f"Bearer {token}"))

        self.assertEqual(user.user_id, "uid-1")
        self.assertEqual(user.client_id, "mobile-app")
        self.assertEqual(user.scopes, ["tasks:read"])
        self.assertEqual(returned_token, token)
        self.assertEqual(get_user_id(), "uid-1")

    def test_user_id_claim_fallback(self):
        """Test tokens carrying user_id instead of sub."""
        token = _jwt(sub=None, user_id="uid-2")

        user, _ = self.auth.authenticate(self._request(f"Bearer {token}"))

        self.assertEqual(user.user_id, "uid-2")

    def test_rejects_token_without_subject(self):
        """Test a token with neither sub nor user_id is rejected."""
        token = _jwt(sub=None)

        with self.assertRaisesMessage(exceptions.AuthenticationFailed, "no subject"):
            self.auth.authenticate(self._request(f"Bearer {token}"))

    def test_rejects_malformed_header(self):
        """Test non-bearer schemes are rejected."""
        for header in ("Basic abc", "Bearer", "Bearer a b"):
            with self.subTest(header=header), self.assertRaises(
                exceptions.AuthenticationFailed
            ):
                self.auth.authenticate(self._request(header))

    def test_rejects_wrong_signature(self):
        """Test tokens signed with another secret are rejected."""
        token = _jwt(secret="another-secret-with-enough-length")

        with self.assertRaisesMessage(exceptions.AuthenticationFailed, "Invalid token"):
            self.auth.authenticate(self._request(f"Bearer {token}"))

    def test_rejects_expired_token(self):
        """Test expired tokens are rejected."""
        token = _jwt(exp=time.time() - 60)

        with self.assertRaisesMessage(exceptions.AuthenticationFailed, "expired"):
            self.auth.authenticate(self._request(f"Bearer {token}"))

    def test_rejects_refresh_token(self):
        """Test only access tokens are accepted."""
        token = _jwt(type="refresh_token")

        with self.assertRaisesMessage(
            exceptions.AuthenticationFailed, "Invalid token type"
        ):
            self.auth.authenticate(self._request(f"Bearer {token}"))

    @override_settings(JWT_SECRET="")
    def test_missing_secret(self):
        """Test validation fails closed without a secret."""
        with self.assertRaisesMessage(
            exceptions.AuthenticationFailed, "not configured"
        ):
            self.auth.authenticate(self._request(f"Bearer {_jwt()}"))

    @override_settings(OAUTH2_SERVICE_ENABLED=False)
    def test_disabled(self):
        """Test authentication is skipped when OAuth2 is disabled."""
        self.assertIsNone(self.auth.authenticate(self._request(f"Bearer {_jwt()}")))

    def test_authenticate_header(self):
        """Test 401 responses advertise the bearer scheme."""
        self.assertEqual(self.auth.authenticate_header(self._request()), "Bearer")


@override_settings(
    OAUTH2_INTROSPECTION_ENABLED=True,
    OAUTH2_INTROSPECT_URL=INTROSPECT_URL,
    OAUTH2_CLIENT_ID="task-alert-service",
    OAUTH2_CLIENT_SECRET="s3cret",
)
class TestOAuth2AuthenticationIntrospection(SimpleTestCase):
    """Test cases for token introspection."""

    def setUp(self):
        """Set up test fixtures."""
        cache.clear()
        self.auth = OAuth2Authentication()
        self.request = RequestFactory().get(
            "/api/v1/notifications", HTTP_AUTHORIZATION="Bearer opaque-token-value"
        )

    def tearDown(self):
        """Clear the logging context set by authenticate."""
        clear_request_context()

    @responses.activate
    def test_active_token_is_cached(self):
        """Test an active token authenticates and is cached."""
        responses.add(
            responses.POST,
            INTROSPECT_URL,
            json={"active": True, "sub": "uid-9", "client_id": "web", "scopes": []},
            status=200,
        )

        first, _ = self.auth.authenticate(self.request)
        second, _ = self.auth.authenticate(self.request)

        self.assertEqual(first.user_id, "uid-9")
        self.assertEqual(second.user_id, "uid-9")
        self.assertEqual(len(responses.calls), 1)
        self.assertIn("Authorization", responses.calls[0].request.headers)

    @responses.activate
    def test_inactive_token(self):
        """Test inactive tokens are rejected."""
        responses.add(
            responses.POST, INTROSPECT_URL, json={"active": False}, status=200
        )

        with self.assertRaisesMessage(exceptions.AuthenticationFailed, "not active"):
            self.auth.authenticate(self.request)

    @responses.activate
    def test_introspection_error_status(self):
        """Test a failing introspection endpoint rejects the token."""
        responses.add(responses.POST, INTROSPECT_URL, status=500)

        with self.assertRaisesMessage(
            exceptions.AuthenticationFailed, "introspection failed"
        ):
            self.auth.authenticate(self.request)

    @responses.activate
    def test_introspection_unreachable(self):
        """Test an unreachable auth service rejects the token."""
        responses.add(
            responses.POST,
            INTROSPECT_URL,
            body=requests.ConnectionError("connection refused"),
        )

        with self.assertRaisesMessage(exceptions.AuthenticationFailed, "unavailable"):
            self.auth.authenticate(self.request)
