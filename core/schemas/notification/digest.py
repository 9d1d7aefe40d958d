"""Schema for a periodic digest email."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.notification.post_aggregate import PostAggregate
from core.schemas.user.receiver import Receiver


class Digest(BaseSchemaModel):
    """A receiver's most active posts for one digest period."""

    receiver: Receiver = Field(..., description="User to email")
    posts: list[PostAggregate] = Field(
        default_factory=list, description="Up to three posts, most active first"
    )
