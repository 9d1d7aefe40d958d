"""Database models for core application."""

from core.models.message import Message
from core.models.notification import Notification
from core.models.thread import MessageThread, ThreadParticipant
from core.models.user import User

__all__ = ["Message", "MessageThread", "Notification", "ThreadParticipant", "User"]
