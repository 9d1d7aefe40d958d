"""Repository for direct message thread queries."""

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from django.db import DEFAULT_DB_ALIAS
from django.db.models import OuterRef, Prefetch, Subquery

from core.enums import ThreadStatus
from core.models import Message, MessageThread, ThreadParticipant

# Relationship statuses that still allow message emails
NOTIFIABLE_THREAD_STATUSES = [ThreadStatus.ACCEPTED.value, ThreadStatus.PENDING.value]


class ThreadRepository:
    """Repository for encapsulating thread and message queries."""

    def __init__(self, alias: str = DEFAULT_DB_ALIAS) -> None:
        """Initialize the repository.

        Args:
            alias: Django database alias to query
        """
        self.alias = alias

    def get_unread_threads(self, accessed_before: datetime) -> list[MessageThread]:
        """Find threads with a participant who has stale unread messages.

        The same participant must have unread messages, have last opened the
        thread before ``accessed_before`` and be in an accepted or pending
        relationship. Participants come prefetched with their user records.

        Args:
            accessed_before: Upper bound (exclusive) for the last access time

        Returns:
            List of matching threads
        """
        participants = ThreadParticipant.objects.using(self.alias).select_related(
            "user"
        )
        return list(
            MessageThread.objects.using(self.alias)
            .filter(
                participants__new_messages__gt=0,
                participants__last_access__lt=accessed_before,
                participants__status__in=NOTIFIABLE_THREAD_STATUSES,
            )
            .distinct()
            .prefetch_related(Prefetch("participants", queryset=participants))
        )

    def get_latest_messages(self, thread_ids: Iterable[UUID]) -> dict[UUID, Message]:
        """Fetch only the most recent message of each thread.

        The latest message is the one with the greatest creation time; equal
        creation times are resolved by the greater message ID.

        Args:
            thread_ids: Threads to look up

        Returns:
            Mapping of thread ID to its latest message. Threads without any
            message are absent.
        """
        thread_ids = list(thread_ids)
        if not thread_ids:
            return {}

        newest = (
            Message.objects.using(self.alias)
            .filter(thread=OuterRef("thread"))
            .order_by("-created_at", "-message_id")
            .values("message_id")[:1]
        )
        messages = Message.objects.using(self.alias).filter(
            thread_id__in=thread_ids,
            message_id=Subquery(newest),
        )
        return {message.thread_id: message for message in messages}
