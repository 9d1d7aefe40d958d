"""User model."""

import uuid
from typing import ClassVar

from django.db import models


class User(models.Model):
    """User model matching the main application's users table.

    This model is unmanaged as the database schema is owned by another service.
    It provides read-only access to the email address and notification
    preferences needed to decide what to email.

    ``notify_prefs`` holds nested per-channel flags, for example
    ``{"instant": {"message": False}, "digest": "weekly"}``.
    """

    user_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(max_length=50, unique=True)
    email = models.EmailField(max_length=255)
    notify_prefs = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.username} ({self.email})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(user_id={self.user_id}, username='{self.username}')>"

    def instant_message_emails_enabled(self) -> bool:
        """Whether direct messages may be emailed to this user right away.

        Only an explicit ``False`` under ``notify_prefs["instant"]["message"]``
        disables them; missing or malformed preferences leave them enabled.
        """
        prefs = self.notify_prefs if isinstance(self.notify_prefs, dict) else {}
        instant = prefs.get("instant")
        if not isinstance(instant, dict):
            return True
        return instant.get("message") is not False
