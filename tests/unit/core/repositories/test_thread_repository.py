"""Tests for core.repositories.thread_repository module."""

from datetime import timedelta
from uuid import UUID

from django.test import TestCase
from django.utils import timezone

from core.models import Message
from core.repositories import ThreadRepository
from tests.factories import make_thread, make_user


class TestGetUnreadThreads(TestCase):
    """Tests for ThreadRepository.get_unread_threads."""

    def setUp(self):
        """Set up test fixtures."""
        self.repository = ThreadRepository()
        self.cutoff = timezone.now() - timedelta(minutes=30)

    def test_returns_each_thread_once_with_participants(self):
        """Test that matching threads are distinct and carry their users."""
        sender, receiver = make_user(), make_user()
        thread = make_thread(sender, receiver)

        threads = self.repository.get_unread_threads(self.cutoff)

        self.assertEqual([t.thread_id for t in threads], [thread.thread_id])
        with self.assertNumQueries(0):
            users = {p.user.user_id for p in threads[0].participants.all()}
        self.assertEqual(users, {sender.user_id, receiver.user_id})

    def test_excludes_threads_without_unread_messages(self):
        """Test that threads where nobody has unread messages are ignored."""
        make_thread(make_user(), make_user(), unread=0)

        self.assertEqual(self.repository.get_unread_threads(self.cutoff), [])

    def test_last_access_bound_is_exclusive(self):
        """Test that a participant who last accessed at the cutoff is excluded."""
        make_thread(make_user(), make_user(), last_access=self.cutoff)

        self.assertEqual(self.repository.get_unread_threads(self.cutoff), [])


class TestGetLatestMessages(TestCase):
    """Tests for ThreadRepository.get_latest_messages."""

    def setUp(self):
        """Set up test fixtures."""
        self.repository = ThreadRepository()
        self.sender = make_user()
        self.receiver = make_user()

    def test_returns_latest_message_per_thread(self):
        """Test that only the most recent message of each thread is returned."""
        first = make_thread(self.sender, self.receiver, messages=3)
        second = make_thread(make_user(), make_user(), messages=2)
        expected = {
            thread.thread_id: thread.messages.order_by("-created_at").first()
            for thread in (first, second)
        }

        latest = self.repository.get_latest_messages(
            [first.thread_id, second.thread_id]
        )

        self.assertEqual(
            {thread_id: m.message_id for thread_id, m in latest.items()},
            {thread_id: m.message_id for thread_id, m in expected.items()},
        )

    def test_equal_creation_times_resolve_by_greater_message_id(self):
        """Test that ties on creation time pick the greater message ID."""
        thread = make_thread(self.sender, self.receiver, messages=0)
        created_at = timezone.now()
        for message_id in (UUID(int=2), UUID(int=1)):
            Message.objects.create(
                message_id=message_id,
                thread=thread,
                sender=self.sender,
                created_at=created_at,
            )

        latest = self.repository.get_latest_messages([thread.thread_id])

        self.assertEqual(latest[thread.thread_id].message_id, UUID(int=2))

    def test_threads_without_messages_are_absent(self):
        """Test that a thread with no messages is missing from the mapping."""
        thread = make_thread(self.sender, self.receiver, messages=0)

        self.assertEqual(self.repository.get_latest_messages([thread.thread_id]), {})

    def test_empty_input_runs_no_query(self):
        """Test that no thread IDs means no query."""
        with self.assertNumQueries(0):
            self.assertEqual(self.repository.get_latest_messages([]), {})
