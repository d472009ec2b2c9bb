"""Production entry point: serve the task alert service with Gunicorn.

Bind address and worker counts come from the environment so the same
image runs in every deployment.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def build_gunicorn_argv() -> list[str]:
    """Assemble Gunicorn's command line from environment variables.

    Environment Variables:
    - HOST / PORT: bind address (default 0.0.0.0:8000)
    - GUNICORN_WORKERS: worker processes (default 4)
    - GUNICORN_THREADS: threads per worker (default 2)
    - GUNICORN_TIMEOUT: worker timeout in seconds (default 60)
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = os.getenv("PORT", "8000")
    return [
        "gunicorn",
        "task_alert_service.wsgi:application",
        "--bind",
        f"{host}:{port}",
        "--workers",
        os.getenv("GUNICORN_WORKERS", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        os.getenv("GUNICORN_TIMEOUT", "60"),
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    """Start Gunicorn with the assembled arguments."""
    sys.argv = build_gunicorn_argv()
    run()


if __name__ == "__main__":
    main()
