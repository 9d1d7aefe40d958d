"""Exception types for the digest service."""

from core.exceptions.configuration_exceptions import (
    ConfigurationError,
    UnsupportedFrequencyError,
)

__all__ = [
    "ConfigurationError",
    "UnsupportedFrequencyError",
]
