"""Service for finding unread direct messages that are due for an email."""

from datetime import timedelta

from django.conf import settings
from django.db.backends.base.base import BaseDatabaseWrapper
from django.utils import timezone

import structlog
from pydantic import ValidationError

from core.models import MessageThread, ThreadParticipant
from core.repositories import ThreadRepository
from core.schemas.message import (
    MessageReceiver,
    MessageSummary,
    ParticipantSummary,
    UnreadMessage,
)
from core.services.database_connection import DatabaseConnectionManager

logger = structlog.get_logger(__name__)


def resolve_participants(
    thread: MessageThread,
) -> tuple[ThreadParticipant, ThreadParticipant] | None:
    """Work out who sent and who received the unread messages of a thread.

    In a direct message thread only the receiver has a nonzero unread count;
    the sender's count is zero.

    Args:
        thread: Thread with its participants prefetched

    Returns:
        ``(sender, receiver)``, or None when the counts do not identify
        exactly one of each.
    """
    participants = list(thread.participants.all())
    senders = [p for p in participants if p.new_messages == 0]
    receivers = [p for p in participants if p.new_messages > 0]
    if len(participants) != 2 or len(senders) != 1 or len(receivers) != 1:
        return None
    return senders[0], receivers[0]


class UnreadMessageFinder:
    """Finds threads whose receiver has not read new messages for a while.

    This is a pure read; nothing is stamped, so repeated invocations return
    the same messages until the receiver opens the thread.
    """

    def __init__(
        self,
        connection: BaseDatabaseWrapper | None = None,
        connection_manager: DatabaseConnectionManager | None = None,
        lookback_interval: int | None = None,
    ) -> None:
        """Initialize the finder.

        Args:
            connection: Already established handle to reuse, if any
            connection_manager: Manager used to (re)connect
            lookback_interval: Minutes since the receiver's last visit before
                an email; defaults to INSTANT_UNREAD_LOOKBACK_INTERVAL
        """
        self.connection = connection
        self.connection_manager = connection_manager or DatabaseConnectionManager()
        self._lookback_interval = lookback_interval

    @property
    def lookback_interval(self) -> int:
        """Instant lookback interval in minutes."""
        if self._lookback_interval is not None:
            return self._lookback_interval
        return settings.INSTANT_UNREAD_LOOKBACK_INTERVAL

    def find_unread_direct_messages(self) -> list[UnreadMessage]:
        """Pair each stale unread thread's latest message with its participants.

        Returns:
            One entry per thread whose receiver should be emailed
        """
        self.connection = self.connection_manager.connect(self.connection)
        repository = ThreadRepository(alias=self.connection.alias)

        accessed_before = timezone.now() - timedelta(minutes=self.lookback_interval)
        threads = repository.get_unread_threads(accessed_before)
        latest_messages = repository.get_latest_messages(
            thread.thread_id for thread in threads
        )

        results = []
        for thread in threads:
            message = latest_messages.get(thread.thread_id)
            if message is None:
                logger.debug(
                    "thread_skipped_no_messages", thread_id=str(thread.thread_id)
                )
                continue

            unread = self._build_unread_message(thread, message)
            if unread is not None:
                results.append(unread)

        logger.info(
            "unread_messages_found",
            threads=len(threads),
            count=len(results),
            lookback_minutes=self.lookback_interval,
        )
        return results

    def _build_unread_message(self, thread, message) -> UnreadMessage | None:
        pair = resolve_participants(thread)
        if pair is None:
            logger.warning(
                "thread_skipped_unresolved_participants",
                thread_id=str(thread.thread_id),
            )
            return None
        sender, receiver = pair

        receiver_user = receiver.user
        if receiver_user is None:
            logger.warning(
                "thread_skipped_receiver_not_found",
                thread_id=str(thread.thread_id),
                receiver_id=str(receiver.user_id),
            )
            return None

        if not receiver_user.instant_message_emails_enabled():
            logger.debug(
                "thread_skipped_instant_messages_disabled",
                thread_id=str(thread.thread_id),
                receiver_id=str(receiver.user_id),
            )
            return None

        try:
            return UnreadMessage(
                sender=ParticipantSummary.model_validate(sender),
                receiver=MessageReceiver(
                    **ParticipantSummary.model_validate(receiver).model_dump(),
                    email=receiver_user.email,
                ),
                message=MessageSummary.model_validate(message),
            )
        except ValidationError as e:
            logger.warning(
                "thread_skipped_invalid",
                thread_id=str(thread.thread_id),
                error=str(e),
            )
            return None


# Global unread message finder instance
unread_message_finder = UnreadMessageFinder()
