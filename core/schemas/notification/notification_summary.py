"""Schema for a single notification."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from core.enums import NotificationAction
from core.schemas.base_schema_model import BaseSchemaModel


class NotificationSummary(BaseSchemaModel):
    """Notification fields forwarded to the email service."""

    notification_id: UUID = Field(..., description="Notification ID")
    receiver_id: UUID | None = Field(None, description="Receiver user ID")
    post: dict[str, Any] = Field(..., description="Referenced post document")
    action: NotificationAction = Field(..., description="Interaction kind")
    created_at: datetime = Field(..., description="When the interaction happened")
    read_at: datetime | None = Field(None, description="When it was read in-app")

    @property
    def post_id(self) -> str | None:
        """Identifier of the referenced post, as a string."""
        post_id = self.post.get("id")
        return None if post_id is None else str(post_id)
