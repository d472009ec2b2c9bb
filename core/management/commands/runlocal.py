"""Development server for the task alert service.

The users, tasks and task_notifications tables are owned by the platform
database, so the migration check that runserver performs at startup is
skipped. Host and port default to the HOST and PORT environment variables.
"""

import os

from django.core.management.commands.runserver import Command as RunServer


class Command(RunServer):
    """runserver without migration checks, bound from the environment."""

    help = "Start the development server without migration checks"

    default_addr = os.getenv("HOST", "127.0.0.1")
    default_port = os.getenv("PORT", "8000")

    def check_migrations(self, *_args, **_kwargs):
        """Report instead of checking; the schema is managed externally."""
        self.stdout.write(
            self.style.WARNING(
                "Skipping migration checks (tables are managed externally)"
            )
        )
