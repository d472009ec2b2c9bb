"""Component tests for the notification inbox endpoints."""

from datetime import timedelta
from unittest.mock import patch

from django.test import Client
from django.utils import timezone

from core.models import Notification
from tests.base import BaseComponentTest
from tests.factories import NotificationFactory

RECIPIENT = "uid-recipient"
OTHER = "uid-other"


class TestNotificationEndpoints(BaseComponentTest):
    """Component tests for /notifications."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = Client()
        now = timezone.now()
        self.notifications = [
            NotificationFactory(
                recipient_id=RECIPIENT, created_at=now - timedelta(minutes=i)
            )
            for i in range(3)
        ]
        self.foreign = NotificationFactory(recipient_id=OTHER)

    @patch("core.auth.oauth2.OAuth2Authentication.authenticate")
    def test_list_notifications(self, mock_authenticate):
        """Test the inbox lists the requester's notifications newest first."""
        self.authenticate_as(RECIPIENT, mock_authenticate)

        response = self.client.get("/api/v1/notifications", {"limit": 2})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(
            [n["id"] for n in data["notifications"]],
            [str(n.notification_id) for n in self.notifications[:2]],
        )
        first = data["notifications"][0]
        self.assertEqual(first["recipientUid"], RECIPIENT)
        self.assertFalse(first["isRead"])
        self.assertEqual(first["type"], "task_assigned")
        self.assertEqual(data["pagination"]["total"], 3)
        self.assertTrue(data["pagination"]["hasMore"])
        self.assertEqual(
            data["pagination"]["nextCursor"],
            str(self.notifications[1].notification_id),
        )

    @patch("core.auth.oauth2.OAuth2Authentication.authenticate")
    def test_list_with_invalid_limit(self, mock_authenticate):
        """Test limits above the maximum return 400."""
        self.authenticate_as(RECIPIENT, mock_authenticate)

        response = self.client.get("/api/v1/notifications", {"limit": 500})

        self.assertEqual(response.status_code, 400)

    @patch("core.auth.oauth2.OAuth2Authentication.authenticate")
    def test_unread_count_and_read_all(self, mock_authenticate):
        """Test read-all clears the unread count."""
        self.authenticate_as(RECIPIENT, mock_authenticate)

        count = self.client.get("/api/v1/notifications/unread-count").json()
        self.assertEqual(count, {"count": 3})

        response = self.client.patch("/api/v1/notifications/read-all")
        self.assertEqual(response.json(), {"message": "Marked 3 notifications as read"})

        response = self.client.patch("/api/v1/notifications/read-all")
        self.assertEqual(response.json(), {"message": "No unread notifications"})
        self.assertFalse(
            Notification.objects.get(
                notification_id=self.foreign.notification_id
            ).is_read
        )

    @patch("core.auth.oauth2.OAuth2Authentication.authenticate")
    def test_get_and_mark_read(self, mock_authenticate):
        """Test reading a single notification and marking it read."""
        self.authenticate_as(RECIPIENT, mock_authenticate)
        notification = self.notifications[0]
        url = f"/api/v1/notifications/{notification.notification_id}"

        response = self.client.get(url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["id"], str(notification.notification_id))

        response = self.client.patch(f"{url}/read")
        self.assertEqual(response.json(), {"message": "Notification marked as read"})
        notification.refresh_from_db()
        self.assertTrue(notification.is_read)

    @patch("core.auth.oauth2.OAuth2Authentication.authenticate")
    def test_foreign_notification_is_not_found(self, mock_authenticate):
        """Test another user's notification cannot be read."""
        self.authenticate_as(RECIPIENT, mock_authenticate)
        url = f"/api/v1/notifications/{self.foreign.notification_id}"

        self.assertEqual(self.client.get(url).status_code, 404)
        self.assertEqual(self.client.patch(f"{url}/read").status_code, 404)

    @patch("core.auth.oauth2.OAuth2Authentication.authenticate")
    def test_delete_notification(self, mock_authenticate):
        """Test deleting own and foreign notifications."""
        self.authenticate_as(RECIPIENT, mock_authenticate)

        response = self.client.delete(
            f"/api/v1/notifications/{self.foreign.notification_id}"
        )
        self.assertEqual(response.status_code, 403)

        own = self.notifications[0]
        response = self.client.delete(f"/api/v1/notifications/{own.notification_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Notification deleted"})
        self.assertFalse(
            Notification.objects.filter(notification_id=own.notification_id).exists()
        )

    def test_requires_authentication(self):
        """Test the inbox requires a bearer token."""
        response = self.client.get("/api/v1/notifications")

        self.assertEqual(response.status_code, 401)
