"""Logging filters for enriching log records with correlation context."""

import logging

from core.logging.context import get_correlation_id


class CorrelationIDFilter(logging.Filter):
    """Add the correlation ID to stdlib log records.

    Records logged outside a request or job get 'N/A'.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add correlation_id attribute to the log record.

        Args:
            record: The log record to enrich.

        Returns:
            True to indicate the record should be logged.
        """
        record.correlation_id = get_correlation_id() or "N/A"
        return True
