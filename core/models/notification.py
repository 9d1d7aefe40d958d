"""Notification model for post interaction events.

Notifications are written by the main application whenever someone comments
on, likes or shares a post. This service only reads them and stamps the
per-frequency "email sent" timestamps.
"""

import uuid
from typing import ClassVar

from django.db import models
from django.utils import timezone

from core.enums import EmailFrequency, NotificationAction


class Notification(models.Model):
    """A single interaction on a post, addressed to the post's owner.

    The four ``*_email_sent_at`` columns guard against duplicate emails: once
    a tier's column is set, the notification is excluded from that tier's
    lookups.

    Attributes:
        notification_id: Unique identifier for the notification.
        receiver: The user being notified; ``None`` when the user is gone.
        post: The referenced post, ``{"id": ..., **metadata}``.
        action: Interaction kind (comment, like, share).
        created_at: When the interaction happened.
        read_at: When the receiver read the notification in the app.
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification",
    )
    receiver = models.ForeignKey(
        "core.User",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        related_name="notifications",
        db_column="receiver_id",
        help_text="User receiving the notification",
    )
    post = models.JSONField(
        help_text="Referenced post: id plus display metadata",
    )
    action = models.CharField(
        max_length=20,
        choices=[(action.value, action.value) for action in NotificationAction],
        help_text="Interaction kind that triggered the notification",
    )
    created_at = models.DateTimeField(
        default=timezone.now,
        help_text="When the notification was created",
    )
    read_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the receiver read the notification",
    )
    instant_email_sent_at = models.DateTimeField(null=True, blank=True)
    daily_email_sent_at = models.DateTimeField(null=True, blank=True)
    weekly_email_sent_at = models.DateTimeField(null=True, blank=True)
    biweekly_email_sent_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        """Django model metadata."""

        db_table = "notifications"
        managed = False
        ordering: ClassVar[list[str]] = ["created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["receiver", "created_at"]),
            models.Index(fields=["read_at", "instant_email_sent_at", "created_at"]),
        ]

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.action} for user {self.receiver_id}"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.notification_id}, "
            f"action={self.action}, "
            f"receiver={self.receiver_id}, "
            f"read_at={self.read_at})>"
        )

    @staticmethod
    def email_sent_field(frequency: EmailFrequency | str) -> str:
        """Name of the sent-stamp column for a frequency tier."""
        return f"{EmailFrequency(frequency).value}_email_sent_at"
