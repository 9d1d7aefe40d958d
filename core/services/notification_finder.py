"""Service for finding notifications that are due for an email."""

from datetime import timedelta
from uuid import UUID

from django.conf import settings
from django.db.backends.base.base import BaseDatabaseWrapper
from django.utils import timezone

import structlog
from pydantic import ValidationError

from core.enums import EmailFrequency
from core.exceptions import UnsupportedFrequencyError
from core.models import Notification
from core.repositories import NotificationRepository
from core.schemas.notification import (
    Digest,
    InstantNotification,
    NotificationSummary,
)
from core.schemas.user import Receiver
from core.services.database_connection import DatabaseConnectionManager
from core.services.digest_aggregator import aggregate_notifications

logger = structlog.get_logger(__name__)

# Lookback window of each digest tier
DIGEST_INTERVAL_DAYS = {
    EmailFrequency.DAILY: 1,
    EmailFrequency.WEEKLY: 7,
    EmailFrequency.BIWEEKLY: 14,
}


def parse_frequency(frequency: EmailFrequency | str) -> EmailFrequency:
    """Validate a frequency value.

    Raises:
        UnsupportedFrequencyError: If the value is not a known tier.
    """
    try:
        return EmailFrequency(frequency)
    except ValueError:
        raise UnsupportedFrequencyError(frequency, EmailFrequency.values()) from None


class NotificationFinder:
    """Finds instant notifications and builds digests.

    Every notification returned is stamped for its tier before the call
    returns, so a retried or repeated invocation does not hand it out again.
    A crash between selection and stamping can still cause a repeat, so
    callers get at-most-once on a best-effort basis only.
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
            lookback_interval: Minutes an unread notification must age before
                an instant email; defaults to INSTANT_UNREAD_LOOKBACK_INTERVAL
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

    def _repository(self) -> NotificationRepository:
        self.connection = self.connection_manager.connect(self.connection)
        return NotificationRepository(alias=self.connection.alias)

    def find_notifications(
        self, frequency: EmailFrequency | str
    ) -> list[InstantNotification] | list[Digest]:
        """Find notifications due for the given email frequency.

        Args:
            frequency: ``instant`` or one of the digest tiers

        Returns:
            Instant notifications for ``instant``, otherwise one digest per
            receiver

        Raises:
            UnsupportedFrequencyError: If the frequency is unknown.
        """
        frequency = parse_frequency(frequency)
        if frequency == EmailFrequency.INSTANT:
            return self._find_instant_notifications()
        return self._find_digest_notifications(frequency)

    def _find_instant_notifications(self) -> list[InstantNotification]:
        repository = self._repository()
        created_before = timezone.now() - timedelta(minutes=self.lookback_interval)

        notifications = repository.get_instant_candidates(created_before)

        # Every candidate is stamped, including rows that fail conversion below
        stamped = repository.set_email_sent_at(
            [n.notification_id for n in notifications], EmailFrequency.INSTANT
        )

        results = []
        for notification in notifications:
            try:
                results.append(InstantNotification.model_validate(notification))
            except ValidationError as e:
                logger.warning(
                    "notification_skipped_invalid",
                    notification_id=str(notification.notification_id),
                    error=str(e),
                )

        logger.info(
            "instant_notifications_found",
            count=len(results),
            stamped=stamped,
            lookback_minutes=self.lookback_interval,
        )
        return results

    def _find_digest_notifications(self, frequency: EmailFrequency) -> list[Digest]:
        interval_days = DIGEST_INTERVAL_DAYS.get(frequency)
        if interval_days is None:
            raise UnsupportedFrequencyError(frequency.value, EmailFrequency.values())

        repository = self._repository()
        created_after = timezone.now() - timedelta(days=interval_days)

        notifications = repository.get_digest_candidates(frequency, created_after)

        by_receiver: dict[UUID, list[Notification]] = {}
        for notification in notifications:
            by_receiver.setdefault(notification.receiver_id, []).append(notification)

        digests = []
        processed_ids = []
        for receiver_notifications in by_receiver.values():
            processed_ids.extend(n.notification_id for n in receiver_notifications)
            digest = self._build_digest(receiver_notifications)
            if digest is not None:
                digests.append(digest)

        stamped = repository.set_email_sent_at(processed_ids, frequency)

        logger.info(
            "digest_notifications_found",
            frequency=frequency.value,
            receivers=len(digests),
            notifications=len(processed_ids),
            stamped=stamped,
            interval_days=interval_days,
        )
        return digests

    def _build_digest(self, notifications: list[Notification]) -> Digest | None:
        receiver_user = notifications[0].receiver
        try:
            receiver = Receiver.model_validate(receiver_user)
        except ValidationError as e:
            logger.warning(
                "digest_skipped_invalid_receiver",
                receiver_id=str(receiver_user.user_id),
                error=str(e),
            )
            return None

        summaries = []
        for notification in notifications:
            try:
                summaries.append(NotificationSummary.model_validate(notification))
            except ValidationError as e:
                logger.warning(
                    "notification_skipped_invalid",
                    notification_id=str(notification.notification_id),
                    error=str(e),
                )

        posts = aggregate_notifications(summaries)
        if not posts:
            logger.warning(
                "digest_skipped_no_posts",
                receiver_id=str(receiver_user.user_id),
                notifications=len(notifications),
            )
            return None

        return Digest(receiver=receiver, posts=posts)


# Global notification finder instance
notification_finder = NotificationFinder()
