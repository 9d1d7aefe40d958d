"""Interaction kinds that produce a notification."""

from enum import Enum


class NotificationAction(str, Enum):
    """Action another user took on the receiver's post."""

    COMMENT = "comment"
    LIKE = "like"
    SHARE = "share"
