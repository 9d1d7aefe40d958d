"""Email frequency tiers."""

from enum import Enum


class EmailFrequency(str, Enum):
    """How often a user is emailed about pending notifications.

    INSTANT emails each notification shortly after it is created; the other
    tiers batch notifications into a periodic digest.
    """

    INSTANT = "instant"
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"

    @classmethod
    def values(cls) -> list[str]:
        """Return all frequency values in declaration order."""
        return [frequency.value for frequency in cls]
