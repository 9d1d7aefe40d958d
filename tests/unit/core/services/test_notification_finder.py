"""Tests for core.services.notification_finder module."""

from datetime import timedelta
from unittest.mock import patch
from uuid import uuid4

from django.test import TestCase
from django.utils import timezone

from core.enums import EmailFrequency, NotificationAction
from core.exceptions import ConfigurationError, UnsupportedFrequencyError
from core.models import Notification
from core.schemas.notification import Digest, InstantNotification
from core.services.notification_finder import NotificationFinder, parse_frequency
from tests.factories import make_notification, make_post, make_user


class TestParseFrequency(TestCase):
    """Tests for parse_frequency."""

    def test_accepts_strings_and_enum_members(self):
        """Test that known tiers are returned as EmailFrequency members."""
        self.assertEqual(parse_frequency("weekly"), EmailFrequency.WEEKLY)
        self.assertEqual(parse_frequency(EmailFrequency.DAILY), EmailFrequency.DAILY)

    def test_rejects_unknown_frequency(self):
        """Test that an unknown tier raises UnsupportedFrequencyError."""
        with self.assertRaises(UnsupportedFrequencyError) as ctx:
            parse_frequency("monthly")

        self.assertEqual(ctx.exception.frequency, "monthly")
        self.assertEqual(
            ctx.exception.supported, ["instant", "daily", "weekly", "biweekly"]
        )
        self.assertIsInstance(ctx.exception, ConfigurationError)
        self.assertIn("monthly", str(ctx.exception))


class TestInstantNotifications(TestCase):
    """Tests for the instant path of NotificationFinder.find_notifications."""

    def setUp(self):
        """Set up test fixtures."""
        self.finder = NotificationFinder(lookback_interval=30)
        self.receiver = make_user()
        self.old = timezone.now() - timedelta(hours=1)

    def test_returns_old_unread_notifications_with_receiver(self):
        """Test that an unread notification past the lookback is returned."""
        notification = make_notification(self.receiver, created_at=self.old)

        results = self.finder.find_notifications("instant")

        self.assertEqual(len(results), 1)
        self.assertIsInstance(results[0], InstantNotification)
        self.assertEqual(results[0].notification_id, notification.notification_id)
        self.assertEqual(results[0].receiver.user_id, self.receiver.user_id)
        self.assertEqual(results[0].receiver.email, self.receiver.email)

    def test_second_lookup_returns_nothing(self):
        """Test that returned notifications are stamped and not handed out again."""
        make_notification(self.receiver, created_at=self.old)

        first = self.finder.find_notifications(EmailFrequency.INSTANT)
        second = self.finder.find_notifications(EmailFrequency.INSTANT)

        self.assertEqual(len(first), 1)
        self.assertEqual(second, [])

    def test_stamps_only_the_instant_tier(self):
        """Test that the instant lookup leaves the digest tiers untouched."""
        notification = make_notification(self.receiver, created_at=self.old)

        self.finder.find_notifications("instant")

        notification.refresh_from_db()
        self.assertIsNotNone(notification.instant_email_sent_at)
        self.assertIsNone(notification.daily_email_sent_at)
        self.assertIsNone(notification.weekly_email_sent_at)
        self.assertIsNone(notification.biweekly_email_sent_at)

    def test_skips_recent_read_and_already_sent_notifications(self):
        """Test that only unread, unsent notifications past the lookback qualify."""
        make_notification(
            self.receiver, created_at=timezone.now() - timedelta(minutes=10)
        )
        make_notification(self.receiver, created_at=self.old, read_at=timezone.now())
        make_notification(
            self.receiver,
            created_at=self.old,
            instant_email_sent_at=timezone.now(),
        )

        self.assertEqual(self.finder.find_notifications("instant"), [])

    def test_excludes_notifications_of_missing_receivers(self):
        """Test that orphaned notifications are neither returned nor stamped."""
        orphan = Notification.objects.create(
            receiver_id=uuid4(),
            post=make_post(),
            action=NotificationAction.COMMENT.value,
            created_at=self.old,
        )

        results = self.finder.find_notifications("instant")

        self.assertEqual(results, [])
        orphan.refresh_from_db()
        self.assertIsNone(orphan.instant_email_sent_at)

    def test_invalid_notification_is_stamped_but_skipped(self):
        """Test that a malformed row is skipped without blocking the others."""
        broken = make_notification(self.receiver, created_at=self.old)
        Notification.objects.filter(pk=broken.pk).update(action="poke")
        valid = make_notification(self.receiver, created_at=self.old)

        results = self.finder.find_notifications("instant")

        self.assertEqual(
            [r.notification_id for r in results], [valid.notification_id]
        )
        broken.refresh_from_db()
        self.assertIsNotNone(broken.instant_email_sent_at)

    def test_lookback_defaults_to_setting(self):
        """Test that the lookback interval falls back to the setting."""
        with self.settings(INSTANT_UNREAD_LOOKBACK_INTERVAL=120):
            self.assertEqual(NotificationFinder().lookback_interval, 120)


class TestDigestNotifications(TestCase):
    """Tests for the digest path of NotificationFinder.find_notifications."""

    def setUp(self):
        """Set up test fixtures."""
        self.finder = NotificationFinder()
        self.now = timezone.now()
        self.alice = make_user()
        self.bob = make_user()

    def test_builds_one_digest_per_receiver_in_first_seen_order(self):
        """Test that digests are grouped per receiver by first notification."""
        make_notification(self.bob, created_at=self.now - timedelta(hours=5))
        make_notification(self.alice, created_at=self.now - timedelta(hours=4))
        make_notification(self.bob, created_at=self.now - timedelta(hours=3))

        digests = self.finder.find_notifications("daily")

        self.assertTrue(all(isinstance(d, Digest) for d in digests))
        self.assertEqual(
            [d.receiver.user_id for d in digests],
            [self.bob.user_id, self.alice.user_id],
        )

    def test_digest_aggregates_posts(self):
        """Test that a receiver's notifications are reduced to ranked posts."""
        post_a = make_post("A")
        post_b = make_post("B")
        for action in [NotificationAction.LIKE] * 3 + [NotificationAction.SHARE] * 2:
            make_notification(self.alice, post=post_a, action=action)
        make_notification(
            self.alice,
            post=post_b,
            action=NotificationAction.COMMENT,
            created_at=self.now - timedelta(hours=2),
        )
        latest = make_notification(
            self.alice,
            post=post_b,
            action=NotificationAction.COMMENT,
            created_at=self.now - timedelta(hours=1),
        )

        digests = self.finder.find_notifications("weekly")

        self.assertEqual(len(digests), 1)
        posts = digests[0].posts
        self.assertEqual([p.post["id"] for p in posts], ["A", "B"])
        self.assertEqual(posts[0].counts.total, 5)
        self.assertEqual(posts[1].counts.total, 2)
        self.assertEqual(posts[1].latest.notification_id, latest.notification_id)

    def test_weekly_window_boundary(self):
        """Test that exactly seven days old is excluded and six days included."""
        week_ago = self.now - timedelta(days=7)
        excluded = make_notification(self.alice, created_at=week_ago)
        six_days_ago = week_ago + timedelta(days=1)
        included = make_notification(self.alice, created_at=six_days_ago)

        with patch(
            "core.services.notification_finder.timezone.now", return_value=self.now
        ):
            digests = self.finder.find_notifications("weekly")

        self.assertEqual(len(digests), 1)
        self.assertEqual(digests[0].posts[0].post, included.post)
        excluded.refresh_from_db()
        included.refresh_from_db()
        self.assertIsNone(excluded.weekly_email_sent_at)
        self.assertIsNotNone(included.weekly_email_sent_at)

    def test_interval_per_tier(self):
        """Test that daily, weekly and biweekly look back 1, 7 and 14 days."""
        make_notification(self.alice, created_at=self.now - timedelta(days=10))

        self.assertEqual(self.finder.find_notifications("daily"), [])
        self.assertEqual(self.finder.find_notifications("weekly"), [])
        self.assertEqual(len(self.finder.find_notifications("biweekly")), 1)

    def test_stamps_each_tier_independently(self):
        """Test that a daily digest does not consume the weekly tier."""
        notification = make_notification(self.alice)

        self.assertEqual(len(self.finder.find_notifications("daily")), 1)
        self.assertEqual(self.finder.find_notifications("daily"), [])
        self.assertEqual(len(self.finder.find_notifications("weekly")), 1)

        notification.refresh_from_db()
        self.assertIsNotNone(notification.daily_email_sent_at)
        self.assertIsNotNone(notification.weekly_email_sent_at)
        self.assertIsNone(notification.biweekly_email_sent_at)
        self.assertIsNone(notification.instant_email_sent_at)

    def test_includes_read_notifications(self):
        """Test that digests summarize notifications already read in the app."""
        make_notification(self.alice, read_at=self.now)

        self.assertEqual(len(self.finder.find_notifications("daily")), 1)

    def test_excludes_notifications_of_missing_receivers(self):
        """Test that orphaned notifications are not stamped for the tier."""
        orphan = Notification.objects.create(
            receiver_id=uuid4(),
            post=make_post(),
            action=NotificationAction.LIKE.value,
        )

        self.assertEqual(self.finder.find_notifications("daily"), [])
        orphan.refresh_from_db()
        self.assertIsNone(orphan.daily_email_sent_at)

    def test_receiver_without_valid_posts_gets_no_digest(self):
        """Test that a group with no usable post is stamped but not emailed."""
        broken = make_notification(self.bob, post={"title": "no id"})
        make_notification(self.alice)

        digests = self.finder.find_notifications("daily")

        self.assertEqual([d.receiver.user_id for d in digests], [self.alice.user_id])
        self.assertTrue(all(d.posts for d in digests))
        broken.refresh_from_db()
        self.assertIsNotNone(broken.daily_email_sent_at)

    def test_no_notifications_returns_empty_list(self):
        """Test that an empty store yields no digests."""
        self.assertEqual(self.finder.find_notifications("biweekly"), [])

    def test_unsupported_frequency_runs_no_query(self):
        """Test that an unknown frequency is rejected before querying."""
        make_notification(self.alice)

        with self.assertNumQueries(0), self.assertRaises(UnsupportedFrequencyError):
            self.finder.find_notifications("hourly")
