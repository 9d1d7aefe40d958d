"""Schema for an unread direct message awaiting an email."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.message.message_summary import MessageSummary
from core.schemas.message.participant_summary import (
    MessageReceiver,
    ParticipantSummary,
)


class UnreadMessage(BaseSchemaModel):
    """Sender, receiver and latest message of a thread with unread messages."""

    sender: ParticipantSummary = Field(..., description="Participant who wrote")
    receiver: MessageReceiver = Field(..., description="Participant to email")
    message: MessageSummary = Field(..., description="Most recent message")
