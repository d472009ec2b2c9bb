"""Delete notifications older than the retention window."""

from django.core.management.base import BaseCommand, CommandError

import structlog

from core.constants.notification import RETENTION_DAYS
from core.services.notification_dispatch_service import (
    notification_dispatch_service,
)

logger = structlog.get_logger(__name__)


class Command(BaseCommand):
    """Run the notification retention cleanup once.

    Intended to be scheduled externally (cron, Kubernetes CronJob).
    """

    help = "Delete task notifications older than --days days"

    def add_arguments(self, parser):
        parser.add_argument(
            "--days",
            type=int,
            default=RETENTION_DAYS,
            help=f"Retention window in days (default: {RETENTION_DAYS})",
        )

    def handle(self, *_args, **options):
        days = options["days"]
        if days < 1:
            raise CommandError("--days must be at least 1")

        logger.info("notification_cleanup_started", retention_days=days)
        deleted_count = notification_dispatch_service.delete_old_notifications(
            days=days
        )
        self.stdout.write(
            self.style.SUCCESS(f"Deleted {deleted_count} old notifications")
        )
