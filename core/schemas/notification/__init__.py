"""Notification schemas."""

from core.schemas.notification.action_counts import ActionCounts
from core.schemas.notification.digest import Digest
from core.schemas.notification.instant_notification import InstantNotification
from core.schemas.notification.notification_summary import NotificationSummary
from core.schemas.notification.post_aggregate import PostAggregate

__all__ = [
    "ActionCounts",
    "Digest",
    "InstantNotification",
    "NotificationSummary",
    "PostAggregate",
]
