"""Schema for a direct message."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class MessageSummary(BaseSchemaModel):
    """Latest message of a thread."""

    message_id: UUID = Field(..., description="Message ID")
    thread_id: UUID = Field(..., description="Thread the message belongs to")
    sender_id: UUID | None = Field(None, description="Author user ID")
    body: str = Field("", description="Message content")
    created_at: datetime = Field(..., description="When the message was posted")
