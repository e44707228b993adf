import logging
import time

from django.conf import settings
from django.db import connections
from django.db.utils import OperationalError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger("shramdaan.api")


class HealthCheckView(APIView):
    """
    GET /api/health/ for uptime probes. Reports database reachability
    and how long the check took; never requires a token.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        started = time.monotonic()

        try:
            with connections["default"].cursor() as cursor:
                cursor.execute("SELECT 1")
            db_ok = True
        except OperationalError as e:
            logger.warning(f"Health check: database unreachable: {e}")
            db_ok = False

        return Response(
            {
                "status": "ok" if db_ok else "degraded",
                "db": db_ok,
                "env": getattr(settings, "ENV", "unknown"),
                "latency_ms": int((time.monotonic() - started) * 1000),
            }
        )
