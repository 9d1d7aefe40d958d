"""Repositories for database access."""

from core.repositories.notification_repository import NotificationRepository
from core.repositories.thread_repository import ThreadRepository

__all__ = ["NotificationRepository", "ThreadRepository"]
