"""Unit tests for RequestIDMiddleware."""

import unittest
import uuid

from django.http import HttpRequest, HttpResponse

from core.constants import REQUEST_ID_HEADER
from core.logging.context import get_request_id, get_user_id, set_user_id
from core.middleware.request_id import RequestIDMiddleware


class TestRequestIDMiddleware(unittest.TestCase):
    """Test cases for RequestIDMiddleware."""

    def setUp(self):
        """Set up test fixtures."""
        self.seen_request_ids = []

        def mock_get_response(request):
            self.seen_request_ids.append(get_request_id())
            set_user_id("uid-1")
            return HttpResponse("OK")

        self.middleware = RequestIDMiddleware(mock_get_response)

    def _create_request(self, headers=None):
        """Helper to create a test request."""
        request = HttpRequest()
        request.method = "GET"
        request.path = "/api/v1/tasks/my-tasks"
        for key, value in (headers or {}).items():
            request.META[f"HTTP_{key.upper().replace('-', '_')}"] = value
        return request

    def test_generates_request_id_when_not_present(self):
        """Test that middleware generates a UUID when no request ID is provided."""
        request = self._create_request()
        response = self.middleware(request)

        uuid.UUID(request.request_id)
        self.assertEqual(response[REQUEST_ID_HEADER], request.request_id)

    def test_uses_existing_request_id(self):
        """Test that middleware uses existing X-Request-ID header."""
        request = self._create_request(headers={REQUEST_ID_HEADER: "client-id-42"})

        response = self.middleware(request)

        self.assertEqual(request.request_id, "client-id-42")
        self.assertEqual(response[REQUEST_ID_HEADER], "client-id-42")

    def test_request_id_visible_while_handling(self):
        """Test the view sees the request ID in the logging context."""
        request = self._create_request(headers={REQUEST_ID_HEADER: "client-id-42"})

        self.middleware(request)

        self.assertEqual(self.seen_request_ids, ["client-id-42"])

    def test_context_cleared_after_response(self):
        """Test request and user ids do not leak into the next request."""
        self.middleware(self._create_request())

        self.assertIsNone(get_request_id())
        self.assertIsNone(get_user_id())

    def test_context_cleared_when_view_raises(self):
        """Test the context is cleared even if the view raises."""

        def failing_get_response(request):
            raise RuntimeError("boom")

        middleware = RequestIDMiddleware(failing_get_response)

        with self.assertRaises(RuntimeError):
            middleware(self._create_request())

        self.assertIsNone(get_request_id())


if __name__ == "__main__":
    unittest.main()
