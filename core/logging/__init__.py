"""Logging utilities for the digest service."""

from core.logging.config import setup_logging
from core.logging.context import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from core.logging.filters import CorrelationIDFilter

__all__ = [
    "CorrelationIDFilter",
    "clear_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    "setup_logging",
]
