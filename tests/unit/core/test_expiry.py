"""Unit tests for the lazy-expiry helpers."""

import unittest
from datetime import UTC, datetime, timedelta
from types import SimpleNamespace

from core.enums import TaskStatus
from core.expiry import compute_ttl, is_expired, reconcile_expiry, remaining_minutes

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class TestIsExpired(unittest.TestCase):
    """Tests for is_expired."""

    def test_future_expiry_is_not_expired(self):
        self.assertFalse(is_expired(NOW + timedelta(seconds=1), NOW))

    def test_expiry_instant_itself_is_expired(self):
        self.assertTrue(is_expired(NOW, NOW))

    def test_past_expiry_is_expired(self):
        self.assertTrue(is_expired(NOW - timedelta(minutes=5), NOW))


class TestRemainingMinutes(unittest.TestCase):
    """Tests for remaining_minutes."""

    def test_rounds_down_to_whole_minutes(self):
        expires_at = NOW + timedelta(minutes=29, seconds=59)
        self.assertEqual(remaining_minutes(expires_at, NOW), 29)

    def test_never_negative(self):
        self.assertEqual(remaining_minutes(NOW - timedelta(hours=2), NOW), 0)


class TestComputeTtl(unittest.TestCase):
    """Tests for compute_ttl."""

    def test_ttl_is_seven_days_after_expiry(self):
        expires_at = NOW + timedelta(minutes=30)
        self.assertEqual(compute_ttl(expires_at), expires_at + timedelta(days=7))


class TestReconcileExpiry(unittest.TestCase):
    """Tests for reconcile_expiry."""

    def _task(self, status, expires_at):
        return SimpleNamespace(
            status=status, expires_at=expires_at, updated_at=NOW - timedelta(days=1)
        )

    def test_expires_pending_task_past_its_expiry(self):
        task = self._task(TaskStatus.PENDING.value, NOW - timedelta(minutes=1))

        self.assertTrue(reconcile_expiry(task, NOW))
        self.assertEqual(task.status, TaskStatus.EXPIRED.value)
        self.assertEqual(task.updated_at, NOW)

    def test_is_idempotent(self):
        task = self._task(TaskStatus.PENDING.value, NOW - timedelta(minutes=1))
        reconcile_expiry(task, NOW)

        self.assertFalse(reconcile_expiry(task, NOW + timedelta(hours=1)))
        self.assertEqual(task.updated_at, NOW)

    def test_leaves_pending_task_before_expiry(self):
        task = self._task(TaskStatus.PENDING.value, NOW + timedelta(minutes=1))

        self.assertFalse(reconcile_expiry(task, NOW))
        self.assertEqual(task.status, TaskStatus.PENDING.value)

    def test_leaves_terminal_tasks_alone(self):
        for status in (TaskStatus.COMPLETED, TaskStatus.CANCELLED):
            with self.subTest(status=status):
                task = self._task(status.value, NOW - timedelta(minutes=1))
                self.assertFalse(reconcile_expiry(task, NOW))
                self.assertEqual(task.status, status.value)


if __name__ == "__main__":
    unittest.main()
