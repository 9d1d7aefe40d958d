"""Enumerations for the core app."""

from core.enums.email_frequency import EmailFrequency
from core.enums.health_status import HealthStatus
from core.enums.notification_action import NotificationAction
from core.enums.thread_status import ThreadStatus

__all__ = ["EmailFrequency", "HealthStatus", "NotificationAction", "ThreadStatus"]
