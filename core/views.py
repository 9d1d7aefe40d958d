"""API views for core application.

Only health probes are served over HTTP; the finders run from RQ jobs and
management commands.
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.services import health_service


class LivenessCheckView(APIView):
    """Liveness probe endpoint for Kubernetes.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, _request):
        """Handle GET request for liveness check."""
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(by_alias=True), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint for Kubernetes.

    Returns 200 with a degraded status when the database or Redis is
    unavailable, so the service stays in rotation while they recover.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = health_service.get_readiness_status()
        return Response(
            readiness.model_dump(mode="json", by_alias=True),
            status=status.HTTP_200_OK,
        )
