"""Schema for per-action interaction counts."""

from pydantic import Field

from core.enums import NotificationAction
from core.schemas.base_schema_model import BaseSchemaModel


class ActionCounts(BaseSchemaModel):
    """Interaction tally for one post.

    ``total`` always equals ``comment + like + share``.
    """

    comment: int = Field(0, ge=0, description="Comment notifications")
    like: int = Field(0, ge=0, description="Like notifications")
    share: int = Field(0, ge=0, description="Share notifications")
    total: int = Field(0, ge=0, description="All notifications")

    def record(self, action: NotificationAction | str) -> None:
        """Count one notification of the given action kind."""
        field = NotificationAction(action).value
        setattr(self, field, getattr(self, field) + 1)
        self.total += 1
