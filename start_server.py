"""Production server startup script for the digest service.

Serves the health probes with Gunicorn. Dispatch jobs run in separate
``manage.py rqworker default`` and ``manage.py rqscheduler`` processes.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the digest service web process using Gunicorn.

    The bind address and worker count can be overridden with PORT and
    WEB_CONCURRENCY; logs go to stdout/stderr for container log collection.
    """
    sys.argv = [
        "gunicorn",
        "digest_service.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', '8000')}",
        "--workers",
        os.getenv("WEB_CONCURRENCY", "2"),
        "--timeout",
        "30",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
