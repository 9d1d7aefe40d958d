"""Schema for one post's share of a digest."""

from typing import Any

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.notification.action_counts import ActionCounts
from core.schemas.notification.notification_summary import NotificationSummary


class PostAggregate(BaseSchemaModel):
    """Interactions on a single post within a digest."""

    post: dict[str, Any] = Field(..., description="Referenced post document")
    latest: NotificationSummary | None = Field(
        None, description="Most recent comment notification, if any"
    )
    counts: ActionCounts = Field(
        default_factory=ActionCounts, description="Per-action interaction counts"
    )
