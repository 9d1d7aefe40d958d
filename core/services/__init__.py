"""Services for the core app."""

from core.services.database_connection import DatabaseConnectionManager
from core.services.digest_aggregator import aggregate_notifications
from core.services.health_service import HealthService, health_service

# The finders import models; import them from their own modules.

__all__ = [
    "DatabaseConnectionManager",
    "HealthService",
    "aggregate_notifications",
    "health_service",
]
