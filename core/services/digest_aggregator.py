"""Reduce a receiver's notifications to their most active posts."""

from collections.abc import Iterable

import structlog

from core.enums import NotificationAction
from core.schemas.notification import (
    ActionCounts,
    NotificationSummary,
    PostAggregate,
)

logger = structlog.get_logger(__name__)

TOP_POSTS_LIMIT = 3


def aggregate_notifications(
    notifications: Iterable[NotificationSummary],
    limit: int = TOP_POSTS_LIMIT,
) -> list[PostAggregate]:
    """Group one receiver's notifications by post and rank the posts.

    Each post group counts its notifications per action kind and in total,
    and remembers its most recent comment notification (likes and shares
    never become ``latest``). Groups are ordered by total count, highest
    first; equally active posts keep the order in which they were first seen.

    Args:
        notifications: Notifications addressed to a single receiver
        limit: Maximum number of posts to keep

    Returns:
        Up to ``limit`` post aggregates, most active first

    Example:
        >>> posts = aggregate_notifications(receiver_notifications)
        >>> [p.counts.total for p in posts]
        [5, 2]
    """
    groups: dict[str, PostAggregate] = {}

    for notification in notifications:
        post_id = notification.post_id
        if post_id is None:
            logger.warning(
                "notification_skipped_missing_post_id",
                notification_id=str(notification.notification_id),
            )
            continue

        group = groups.get(post_id)
        if group is None:
            group = PostAggregate(post=notification.post, counts=ActionCounts())
            groups[post_id] = group

        _merge(group, notification)

    ranked = sorted(groups.values(), key=lambda g: g.counts.total, reverse=True)
    return ranked[:limit]


def _merge(group: PostAggregate, notification: NotificationSummary) -> None:
    group.counts.record(notification.action)

    if notification.action != NotificationAction.COMMENT:
        return

    if group.latest is None or group.latest.created_at < notification.created_at:
        group.latest = notification
