"""Exceptions raised for invalid service or request configuration."""

from collections.abc import Iterable


class ConfigurationError(Exception):
    """Base exception for invalid configuration values."""

    def __init__(self, message: str, setting: str | None = None):
        """Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the offending setting, if known
        """
        self.setting = setting
        super().__init__(message)


class UnsupportedFrequencyError(ConfigurationError):
    """Email frequency has no lookup interval defined."""

    def __init__(self, frequency: object, supported: Iterable[str]):
        """Initialize unsupported frequency error.

        Args:
            frequency: The rejected frequency value
            supported: Frequency values that are accepted
        """
        self.frequency = frequency
        self.supported = list(supported)
        super().__init__(
            message=(
                f"Unsupported email frequency {frequency!r}; "
                f"expected one of: {', '.join(self.supported)}"
            ),
            setting="frequency",
        )
