"""Repository for notification queries and sent-stamping."""

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from django.db import DEFAULT_DB_ALIAS
from django.db.models import QuerySet
from django.utils import timezone

from core.enums import EmailFrequency
from core.models import Notification


class NotificationRepository:
    """Repository for encapsulating notification database operations.

    Every lookup joins the receiver's user record and drops notifications
    whose receiver no longer exists.
    """

    def __init__(self, alias: str = DEFAULT_DB_ALIAS) -> None:
        """Initialize the repository.

        Args:
            alias: Django database alias to query
        """
        self.alias = alias

    def _with_receiver(self) -> QuerySet[Notification]:
        return (
            Notification.objects.using(self.alias)
            .select_related("receiver")
            .filter(receiver__email__isnull=False)
        )

    def get_instant_candidates(self, created_before: datetime) -> list[Notification]:
        """Find unread notifications not yet emailed instantly.

        Args:
            created_before: Upper bound (exclusive) for the creation time

        Returns:
            Notifications with their receivers, oldest first
        """
        return list(
            self._with_receiver()
            .filter(
                read_at__isnull=True,
                instant_email_sent_at__isnull=True,
                created_at__lt=created_before,
            )
            .order_by("created_at", "notification_id")
        )

    def get_digest_candidates(
        self, frequency: EmailFrequency, created_after: datetime
    ) -> list[Notification]:
        """Find notifications not yet included in a digest of this tier.

        Read state is ignored: a digest summarizes activity whether or not
        the receiver already saw it in the app.

        Args:
            frequency: Digest tier
            created_after: Lower bound (exclusive) for the creation time

        Returns:
            Notifications with their receivers, oldest first
        """
        sent_field = Notification.email_sent_field(frequency)
        return list(
            self._with_receiver()
            .filter(
                **{f"{sent_field}__isnull": True},
                created_at__gt=created_after,
            )
            .order_by("created_at", "notification_id")
        )

    def set_email_sent_at(
        self, notification_ids: Iterable[UUID], frequency: EmailFrequency | str
    ) -> int:
        """Stamp the tier's sent timestamp on notifications in one update.

        Args:
            notification_ids: Notifications that were handed out for emailing
            frequency: Tier whose timestamp is set

        Returns:
            Number of notifications updated
        """
        notification_ids = list(notification_ids)
        if not notification_ids:
            return 0

        sent_field = Notification.email_sent_field(frequency)
        return (
            Notification.objects.using(self.alias)
            .filter(notification_id__in=notification_ids)
            .update(**{sent_field: timezone.now()})
        )
