"""Schema for a notification emailed on its own."""

from pydantic import Field

from core.schemas.notification.notification_summary import NotificationSummary
from core.schemas.user.receiver import Receiver


class InstantNotification(NotificationSummary):
    """Notification joined with its receiver's user record."""

    receiver: Receiver = Field(..., description="User to email")
