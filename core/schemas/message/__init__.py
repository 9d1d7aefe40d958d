"""Direct message schemas."""

from core.schemas.message.message_summary import MessageSummary
from core.schemas.message.participant_summary import (
    MessageReceiver,
    ParticipantSummary,
)
from core.schemas.message.unread_message import UnreadMessage

__all__ = [
    "MessageReceiver",
    "MessageSummary",
    "ParticipantSummary",
    "UnreadMessage",
]
