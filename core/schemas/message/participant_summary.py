"""Schemas for thread participants."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.enums import ThreadStatus
from core.schemas.base_schema_model import BaseSchemaModel


class ParticipantSummary(BaseSchemaModel):
    """A thread participant as seen by the email service."""

    user_id: UUID | None = Field(..., description="Participant user ID")
    new_messages: int = Field(..., ge=0, description="Unread message count")
    last_access: datetime | None = Field(
        None, description="When the participant last opened the thread"
    )
    status: ThreadStatus = Field(..., description="Relationship status")


class MessageReceiver(ParticipantSummary):
    """The participant with unread messages, plus their email address."""

    email: str = Field(..., description="Address the email is sent to")
