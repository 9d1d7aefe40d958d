"""Schema for the user an email is addressed to."""

from typing import Any
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class Receiver(BaseSchemaModel):
    """Recipient user record joined onto notifications and digests."""

    user_id: UUID = Field(..., description="Receiver user ID")
    username: str = Field(..., description="Receiver username")
    email: str = Field(..., description="Address the email is sent to")
    notify_prefs: dict[str, Any] | None = Field(
        None, description="Per-channel notification preferences"
    )
