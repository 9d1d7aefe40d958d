"""Schemas for the core app."""

from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.message import (
    MessageReceiver,
    MessageSummary,
    ParticipantSummary,
    UnreadMessage,
)
from core.schemas.notification import (
    ActionCounts,
    Digest,
    InstantNotification,
    NotificationSummary,
    PostAggregate,
)
from core.schemas.user import Receiver

__all__ = [
    "ActionCounts",
    "DependencyHealth",
    "Digest",
    "InstantNotification",
    "LivenessResponse",
    "MessageReceiver",
    "MessageSummary",
    "NotificationSummary",
    "ParticipantSummary",
    "PostAggregate",
    "ReadinessResponse",
    "Receiver",
    "UnreadMessage",
]
