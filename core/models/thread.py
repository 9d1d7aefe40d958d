"""Direct message thread models."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import ThreadStatus


class MessageThread(models.Model):
    """A conversation between users.

    Direct message threads always have exactly two participants.
    """

    thread_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "message_threads"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of thread."""
        return f"Thread {self.thread_id}"


class ThreadParticipant(models.Model):
    """A user's membership in a thread.

    Attributes:
        thread: The thread this participant belongs to.
        user: The participating user; ``None`` when the user record is gone.
        new_messages: Messages the user has not read yet.
        last_access: When the user last opened the thread.
        status: Whether the user accepted the conversation.
    """

    thread = models.ForeignKey(
        MessageThread,
        on_delete=models.CASCADE,
        related_name="participants",
        db_column="thread_id",
    )
    user = models.ForeignKey(
        "core.User",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        related_name="thread_memberships",
        db_column="user_id",
    )
    new_messages = models.PositiveIntegerField(default=0)
    last_access = models.DateTimeField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=[(status.value, status.value) for status in ThreadStatus],
        default=ThreadStatus.PENDING.value,
    )

    class Meta:
        """Django model metadata."""

        db_table = "thread_participants"
        managed = False
        unique_together: ClassVar[list[list[str]]] = [["thread", "user"]]
        indexes: ClassVar[list] = [
            models.Index(fields=["new_messages", "last_access"]),
        ]

    def __str__(self) -> str:
        """Return string representation of participant."""
        return f"{self.user_id} in {self.thread_id} ({self.new_messages} unread)"
