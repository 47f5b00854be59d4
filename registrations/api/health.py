"""Health check endpoints for container probes."""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.conf import settings
from django.db import connection
import logging
import os

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    Health check endpoint for liveness probes.

    Returns:
        200 OK: Service is healthy
        503 Service Unavailable: Service has issues
    """
    health_status = {"status": "healthy", "checks": {}}

    # Check database connection
    try:
        connection.ensure_connection()
        health_status["checks"]["database"] = "ok"
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        health_status["checks"]["database"] = "error"
        health_status["status"] = "unhealthy"

    # Uploads must land somewhere writable
    upload_dir = str(settings.MEDIA_ROOT)
    if os.path.isdir(upload_dir) and os.access(upload_dir, os.W_OK):
        health_status["checks"]["uploads"] = "ok"
    elif not os.path.exists(upload_dir):
        # Created on first upload
        health_status["checks"]["uploads"] = "missing"
    else:
        logger.error(f"Upload directory {upload_dir} is not writable")
        health_status["checks"]["uploads"] = "error"
        health_status["status"] = "unhealthy"

    if health_status["status"] == "healthy":
        return Response(health_status, status=status.HTTP_200_OK)
    else:
        return Response(health_status, status=status.HTTP_503_SERVICE_UNAVAILABLE)


@api_view(["GET"])
@permission_classes([AllowAny])
def readiness_check(request):
    """
    Readiness check - simple check for readiness probe.
    Just verifies the application is running.
    """
    return Response({"status": "ready"}, status=status.HTTP_200_OK)
