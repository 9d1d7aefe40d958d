"""Factory helpers for test data generation.

Each helper creates and saves one row with Faker-generated defaults; pass
keyword arguments to override any field.
"""

from datetime import datetime, timedelta
from typing import Any

from django.utils import timezone

from faker import Faker

from core.enums import NotificationAction, ThreadStatus
from core.models import (
    Message,
    MessageThread,
    Notification,
    ThreadParticipant,
    User,
)

fake = Faker()


def make_user(**overrides: Any) -> User:
    """Create a user with a unique username and email."""
    fields = {
        "username": fake.unique.user_name(),
        "email": fake.unique.email(),
        "notify_prefs": None,
    }
    fields.update(overrides)
    return User.objects.create(**fields)


def make_post(post_id: str | None = None, **metadata: Any) -> dict[str, Any]:
    """Build a post document as stored on notifications."""
    return {
        "id": post_id or fake.uuid4(),
        "title": metadata.pop("title", fake.sentence(nb_words=4)),
        **metadata,
    }


def make_notification(
    receiver: User | None,
    post: dict[str, Any] | None = None,
    action: NotificationAction = NotificationAction.LIKE,
    created_at: datetime | None = None,
    **overrides: Any,
) -> Notification:
    """Create a notification addressed to ``receiver``."""
    return Notification.objects.create(
        receiver=receiver,
        post=post or make_post(),
        action=action.value,
        created_at=created_at or timezone.now(),
        **overrides,
    )


def make_thread(
    sender: User | None,
    receiver: User | None,
    unread: int = 1,
    last_access: datetime | None = None,
    status: ThreadStatus = ThreadStatus.ACCEPTED,
    sender_unread: int = 0,
    messages: int = 1,
) -> MessageThread:
    """Create a two-party thread where ``receiver`` has unread messages.

    Both participants last accessed the thread two hours ago unless
    ``last_access`` is given.
    Messages are created from ``sender`` one minute apart, oldest first.
    """
    thread = MessageThread.objects.create()
    accessed = last_access or timezone.now() - timedelta(hours=2)
    ThreadParticipant.objects.create(
        thread=thread,
        user=sender,
        new_messages=sender_unread,
        last_access=accessed,
        status=status.value,
    )
    ThreadParticipant.objects.create(
        thread=thread,
        user=receiver,
        new_messages=unread,
        last_access=accessed,
        status=status.value,
    )
    start = timezone.now() - timedelta(minutes=messages)
    for index in range(messages):
        make_message(
            thread,
            sender=sender,
            created_at=start + timedelta(minutes=index),
        )
    return thread


def make_message(
    thread: MessageThread,
    sender: User | None = None,
    created_at: datetime | None = None,
    body: str | None = None,
) -> Message:
    """Create a message in ``thread``."""
    return Message.objects.create(
        thread=thread,
        sender=sender,
        body=body if body is not None else fake.sentence(),
        created_at=created_at or timezone.now(),
    )
