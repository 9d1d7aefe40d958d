"""Relationship status of a message thread participant."""

from enum import Enum


class ThreadStatus(str, Enum):
    """Whether a participant has accepted the conversation."""

    ACCEPTED = "accepted"
    PENDING = "pending"
    DECLINED = "declined"
