"""Health check schemas."""

from pydantic import Field

from core.enums import HealthStatus
from core.schemas.base_schema_model import BaseSchemaModel


class DependencyHealth(BaseSchemaModel):
    """Health status for a single dependency."""

    healthy: bool = Field(..., description="Whether the dependency is healthy")
    status: HealthStatus = Field(..., description="Health status of the dependency")
    message: str = Field(..., description="Human-readable health message")
    response_time_ms: float | None = Field(
        None, description="Response time in milliseconds"
    )


class LivenessResponse(BaseSchemaModel):
    """Response model for liveness checks."""

    status: str = Field(..., description="Liveness status")


class ReadinessResponse(BaseSchemaModel):
    """Response model for readiness checks.

    ``ready`` stays True while degraded; the probe should not take the pod
    out of rotation for a dependency outage.
    """

    ready: bool = Field(..., description="Service is ready to serve requests")
    status: str = Field(..., description="Overall status: 'ready' or 'degraded'")
    degraded: bool = Field(..., description="Whether a dependency is unhealthy")
    dependencies: dict[str, DependencyHealth] = Field(
        ..., description="Status of each dependency"
    )
