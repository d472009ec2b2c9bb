#!/usr/bin/env python
"""Run the task alert service locally."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Start the development server via the ``runlocal`` command.

    Extra command-line arguments (e.g. ``0.0.0.0:9000``) are passed through.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "task_alert_service.settings")
    execute_from_command_line([sys.argv[0], "runlocal", *sys.argv[1:]])


if __name__ == "__main__":
    main()
