"""Unit tests for exception handlers."""

import unittest
from unittest.mock import Mock, patch

from django.http import Http404

from rest_framework import status
from rest_framework.exceptions import NotAuthenticated
from rest_framework.views import APIView

from core.exceptions import (
    DownstreamServiceError,
    ForbiddenError,
    InvalidTransitionError,
    LimitExceededError,
    TaskNotFoundError,
)
from core.exceptions.handlers import custom_exception_handler


class TestCustomExceptionHandler(unittest.TestCase):
    """Test cases for custom exception handler."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_request = Mock()
        self.mock_request.path = "/api/v1/tasks/"
        self.mock_request.method = "POST"

        self.mock_view = Mock(spec=APIView)
        self.mock_view.request = self.mock_request

        self.context = {"view": self.mock_view, "request": self.mock_request}

    @patch("core.exceptions.handlers.get_request_id")
    def test_domain_error_uses_its_status_and_code(self, mock_get_request_id):
        """Test domain errors map onto their own status and error code."""
        mock_get_request_id.return_value = "req-1"
        cases = [
            (TaskNotFoundError("t-1"), 404, "TASK_NOT_FOUND", "Task not found"),
            (
                ForbiddenError("Only task creator can cancel the task"),
                403,
                "ACCESS_DENIED",
                "Only task creator can cancel the task",
            ),
            (
                InvalidTransitionError(
                    "Task is already completed", error_code="TASK_COMPLETED"
                ),
                400,
                "TASK_COMPLETED",
                "Task is already completed",
            ),
            (
                LimitExceededError(
                    "Maximum number of extensions reached",
                    error_code="MAX_EXTENSIONS_REACHED",
                ),
                400,
                "MAX_EXTENSIONS_REACHED",
                "Maximum number of extensions reached",
            ),
        ]
        for exc, status_code, error_code, message in cases:
            with self.subTest(error_code=error_code):
                response = custom_exception_handler(exc, self.context)

                self.assertEqual(response.status_code, status_code)
                self.assertEqual(response.data["status"], status_code)
                self.assertEqual(response.data["error"], error_code)
                self.assertEqual(response.data["message"], message)
                self.assertEqual(response.data["request_id"], "req-1")
                self.assertIn("timestamp", response.data)
                self.assertEqual(response["X-Request-ID"], "req-1")

    @patch("core.exceptions.handlers.get_request_id")
    def test_downstream_error_becomes_bad_gateway(self, mock_get_request_id):
        """Test an escaped downstream failure returns 502."""
        mock_get_request_id.return_value = "req-1"
        exc = DownstreamServiceError("expo-push returned 503", "expo-push", 503)

        response = custom_exception_handler(exc, self.context)

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.data["error"], "DOWNSTREAM_ERROR")

    @patch("core.exceptions.handlers.get_request_id")
    def test_drf_exceptions_are_left_to_drf(self, mock_get_request_id):
        """Test DRF's own exceptions keep DRF's response."""
        mock_get_request_id.return_value = None

        response = custom_exception_handler(NotAuthenticated(), self.context)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertNotIn("X-Request-ID", response)

    @patch("core.exceptions.handlers.get_request_id")
    def test_handles_django_http404(self, mock_get_request_id):
        """Test that Django Http404 exception is handled correctly."""
        mock_get_request_id.return_value = "req-1"

        response = custom_exception_handler(Http404("Page not found"), self.context)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    @patch("core.exceptions.handlers.get_request_id")
    def test_handles_unexpected_exception(self, mock_get_request_id):
        """Test that unexpected exceptions return 500 error."""
        mock_get_request_id.return_value = "req-1"

        response = custom_exception_handler(RuntimeError("boom"), self.context)

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["error"], "INTERNAL_ERROR")
        self.assertNotIn("boom", response.data["message"])

    @patch("core.exceptions.handlers.get_request_id")
    @patch("core.exceptions.handlers.logger")
    def test_logs_client_errors_as_warnings(self, mock_logger, mock_get_request_id):
        """Test 4xx responses are logged at warning level."""
        mock_get_request_id.return_value = "req-1"

        custom_exception_handler(TaskNotFoundError("t-1"), self.context)

        level, message = mock_logger.log.call_args.args
        self.assertEqual(level, 30)
        self.assertIn("TaskNotFoundError", message)
        self.assertIn("POST /api/v1/tasks/", message)

    @patch("core.exceptions.handlers.get_request_id")
    @patch("core.exceptions.handlers.logger")
    def test_logs_server_errors_as_errors(self, mock_logger, mock_get_request_id):
        """Test 5xx responses are logged at error level."""
        mock_get_request_id.return_value = "req-1"

        custom_exception_handler(RuntimeError("boom"), self.context)

        self.assertEqual(mock_logger.log.call_args.args[0], 40)

    @patch("core.exceptions.handlers.get_request_id")
    def test_handles_missing_view(self, mock_get_request_id):
        """Test the handler works without a view in the context."""
        mock_get_request_id.return_value = None

        response = custom_exception_handler(RuntimeError("boom"), {})

        self.assertEqual(response.status_code, 500)


if __name__ == "__main__":
    unittest.main()
