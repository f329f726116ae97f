# backend/health.py

"""
HEALTH ENDPOINTS (PUBLIC)

- ModuleHealthView: per-module liveness (/api/<module>/health/)
- DatabaseHealthView: DB connectivity (/api/health/db/)

Both are AllowAny and skip authentication so load balancers can probe them.
"""

from __future__ import annotations

import logging

from django.db import DatabaseError, connections
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from backend.responses import error_response, success_response

logger = logging.getLogger(__name__)


class ModuleHealthView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    module_name = "Kasir API"

    @extend_schema(responses={200: dict}, description="Module health check")
    def get(self, request):
        return success_response(message=f"{self.module_name} is healthy")


class DatabaseHealthView(APIView):
    """
    Confirms the default connection can run a trivial query.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    name = "Connection to Kasir Database"

    @extend_schema(responses={200: dict, 503: dict}, description="Database health check")
    def get(self, request):
        try:
            with connections["default"].cursor() as cursor:
                cursor.execute("SELECT 1;")
                cursor.fetchone()
        except DatabaseError as exc:
            logger.warning("Database health check failed", extra={"error": str(exc)})
            return error_response(
                message=f"{self.name} is not healthy because {exc}",
                http_status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return success_response(message=f"{self.name} is healthy")
