"""Thread-local correlation context for log events.

A correlation ID ties together every log line of one unit of work: an HTTP
request (from the X-Request-ID header) or one RQ job run (the job ID).
"""

import threading

_correlation_context = threading.local()


def set_correlation_id(correlation_id: str) -> None:
    """Store the correlation ID for the current thread."""
    _correlation_context.correlation_id = correlation_id


def get_correlation_id() -> str | None:
    """Return the current correlation ID, or None if not set."""
    return getattr(_correlation_context, "correlation_id", None)


def clear_correlation_id() -> None:
    """Forget the correlation ID once the unit of work is finished."""
    if hasattr(_correlation_context, "correlation_id"):
        delattr(_correlation_context, "correlation_id")
