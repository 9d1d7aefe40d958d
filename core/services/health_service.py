"""Health checks for the database and the RQ Redis connection."""

import time

from django.db.utils import OperationalError

import django_rq
import structlog
from redis.exceptions import RedisError

from core.enums import HealthStatus
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.services.database_connection import DatabaseConnectionManager

logger = structlog.get_logger(__name__)


def _elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000


class HealthService:
    """Service for performing health checks."""

    def __init__(
        self, connection_manager: DatabaseConnectionManager | None = None
    ) -> None:
        """Initialize the health service.

        Args:
            connection_manager: Manager used to verify the database connection
        """
        self.connection_manager = connection_manager or DatabaseConnectionManager()

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always returns alive)."""
        return LivenessResponse(status="alive")

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status with database and queue health checks.

        Returns degraded (ready=True, degraded=True) when a dependency is down
        so the pod stays in rotation while the dependency recovers.

        Returns:
            ReadinessResponse with overall status and dependency health
        """
        dependencies = {
            "database": self.check_database_health(),
            "queue": self.check_queue_health(),
        }
        degraded = not all(health.healthy for health in dependencies.values())

        return ReadinessResponse(
            ready=True,
            status="degraded" if degraded else "ready",
            degraded=degraded,
            dependencies=dependencies,
        )

    def check_database_health(self) -> DependencyHealth:
        """Check that the shared database connection can be established."""
        start_time = time.perf_counter()
        try:
            self.connection_manager.connect(self.connection_manager.connection)
        except OperationalError as e:
            return DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                response_time_ms=_elapsed_ms(start_time),
            )

        return DependencyHealth(
            healthy=True,
            status=HealthStatus.HEALTHY,
            message="Database connection successful",
            response_time_ms=_elapsed_ms(start_time),
        )

    def check_queue_health(self) -> DependencyHealth:
        """Check that the Redis server backing the RQ queues answers a ping."""
        start_time = time.perf_counter()
        try:
            django_rq.get_connection("default").ping()
        except RedisError as e:
            logger.warning("queue_health_check_failed", error=str(e))
            return DependencyHealth(
                healthy=False,
                status=HealthStatus.DISCONNECTED,
                message=f"Redis connection failed: {e!s}",
                response_time_ms=_elapsed_ms(start_time),
            )

        return DependencyHealth(
            healthy=True,
            status=HealthStatus.HEALTHY,
            message="Redis connection successful",
            response_time_ms=_elapsed_ms(start_time),
        )


# Global health service instance
health_service = HealthService()
