import time
from typing import Any, Dict

import structlog
from django.conf import settings
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger()


def _probe_database() -> Dict[str, Any]:
    start = time.monotonic()
    try:
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError as exc:
        logger.error("health_check_db_failure", error=str(exc))
        return {"status": "down"}
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }


def health_check(request: HttpRequest) -> JsonResponse:
    """Liveness banner for the storefront, served on ``/`` and ``/health``."""
    services = {"database": _probe_database()}
    healthy = all(service["status"] == "up" for service in services.values())

    logger.info("health_check_completed", status="ok" if healthy else "degraded")

    return JsonResponse(
        {
            "status": "ok" if healthy else "degraded",
            "message": f"{settings.STORE_NAME} Backend Server Running",
            "environment": settings.ENVIRONMENT,
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
