import time
import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()

# Sent by Razorpay on every webhook delivery; identical across retries.
GATEWAY_EVENT_ID_HEADER = "HTTP_X_RAZORPAY_EVENT_ID"


class CorrelationIdMiddleware:
    """Tag every request with a correlation ID.

    Reads the X-Request-ID header (the storefront may send one) or
    generates a UUID4.  The ID is bound into the structlog contextvars so
    every log line of the request carries it, and echoed back to the
    caller via the X-Request-ID response header.  Webhook deliveries also
    get the gateway's event id bound as ``gateway_event_id``.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        gateway_event_id = request.META.get(GATEWAY_EVENT_ID_HEADER)
        if gateway_event_id:
            structlog.contextvars.bind_contextvars(gateway_event_id=gateway_event_id)

        started = time.monotonic()
        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )

        response = self.get_response(request)

        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )

        response["X-Request-ID"] = cid
        return response
