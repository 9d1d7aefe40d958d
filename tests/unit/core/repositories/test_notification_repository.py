"""Tests for core.repositories.notification_repository module."""

from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from core.enums import EmailFrequency
from core.repositories import NotificationRepository
from tests.factories import make_notification, make_user


class TestNotificationRepository(TestCase):
    """Tests for NotificationRepository."""

    def setUp(self):
        """Set up test fixtures."""
        self.repository = NotificationRepository()
        self.receiver = make_user()
        self.now = timezone.now()

    def test_instant_candidates_are_oldest_first_with_receiver(self):
        """Test that candidates are ordered by creation time and joined."""
        hour = timedelta(hours=1)
        newer = make_notification(self.receiver, created_at=self.now - hour)
        older = make_notification(self.receiver, created_at=self.now - 2 * hour)

        candidates = self.repository.get_instant_candidates(self.now)

        self.assertEqual(
            [n.notification_id for n in candidates],
            [older.notification_id, newer.notification_id],
        )
        with self.assertNumQueries(0):
            self.assertEqual(candidates[0].receiver.email, self.receiver.email)

    def test_instant_upper_bound_is_exclusive(self):
        """Test that a notification created exactly at the bound is excluded."""
        make_notification(self.receiver, created_at=self.now)

        self.assertEqual(self.repository.get_instant_candidates(self.now), [])

    def test_digest_candidates_filter_by_tier_stamp(self):
        """Test that only notifications unsent for the tier are returned."""
        unsent = make_notification(self.receiver)
        make_notification(self.receiver, weekly_email_sent_at=self.now)

        candidates = self.repository.get_digest_candidates(
            EmailFrequency.WEEKLY, self.now - timedelta(days=7)
        )

        self.assertEqual(
            [n.notification_id for n in candidates], [unsent.notification_id]
        )

    def test_set_email_sent_at_updates_rows(self):
        """Test that the tier timestamp is set on every given notification."""
        first = make_notification(self.receiver)
        second = make_notification(self.receiver)
        untouched = make_notification(self.receiver)

        updated = self.repository.set_email_sent_at(
            [first.notification_id, second.notification_id], "biweekly"
        )

        self.assertEqual(updated, 2)
        for notification in (first, second, untouched):
            notification.refresh_from_db()
        self.assertIsNotNone(first.biweekly_email_sent_at)
        self.assertIsNotNone(second.biweekly_email_sent_at)
        self.assertIsNone(untouched.biweekly_email_sent_at)

    def test_set_email_sent_at_uses_one_query(self):
        """Test that stamping is a single bulk update."""
        ids = [make_notification(self.receiver).notification_id for _ in range(3)]

        with self.assertNumQueries(1):
            self.repository.set_email_sent_at(ids, EmailFrequency.DAILY)

    def test_set_email_sent_at_with_no_ids_runs_no_query(self):
        """Test that an empty ID list returns zero without querying."""
        with self.assertNumQueries(0):
            self.assertEqual(
                self.repository.set_email_sent_at([], EmailFrequency.INSTANT), 0
            )
