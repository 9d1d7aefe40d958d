"""Direct message model."""

import uuid
from typing import ClassVar

from django.db import models
from django.utils import timezone


class Message(models.Model):
    """A single message posted to a thread."""

    message_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    thread = models.ForeignKey(
        "core.MessageThread",
        on_delete=models.CASCADE,
        related_name="messages",
        db_column="thread_id",
    )
    sender = models.ForeignKey(
        "core.User",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        related_name="sent_messages",
        db_column="sender_id",
    )
    body = models.TextField(default="", blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        """Django model metadata."""

        db_table = "messages"
        managed = False
        ordering: ClassVar[list[str]] = ["created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["thread", "created_at"]),
        ]

    def __str__(self) -> str:
        """Return string representation of message."""
        return f"Message {self.message_id} in {self.thread_id}"
