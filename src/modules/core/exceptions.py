"""Project-wide DRF exception handler.

Every API response produced by an error uses the storefront envelope::

    {"success": false, "error": "<message>"}

Views that talk to the payment gateway's servers (the webhook) opt out
of the ``success`` flag by setting ``bare_error_envelope = True``.

Validation and persistence errors are answered with **500** and the raw
error message, matching the contract the storefront client was built
against.  Domain "not found" / signature errors are translated by the
views themselves and never reach this handler.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

VALIDATION_ERRORS = (PydanticValidationError, DjangoValidationError, DatabaseError)


def error_body(message: str, bare: bool = False) -> Dict[str, Any]:
    """Build the error envelope used by every endpoint."""
    if bare:
        return {"error": message}
    return {"success": False, "error": message}


def format_validation_error(exc: Exception) -> str:
    """Render a validation error as a single human-readable line."""
    if isinstance(exc, PydanticValidationError):
        parts = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            parts.append(f"{location}: {error['msg']}" if location else error["msg"])
        return f"{exc.title} validation failed: " + "; ".join(parts)
    if isinstance(exc, DjangoValidationError):
        return "; ".join(exc.messages)
    return str(exc)


def _detail_message(data: Any) -> str:
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return str(data)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Wrap DRF's handler and turn everything else into a 500 envelope."""
    view = context.get("view")
    bare = getattr(view, "bare_error_envelope", False)

    response = exception_handler(exc, context)
    if response is not None:
        response.data = error_body(_detail_message(response.data), bare)
        return response

    set_rollback()
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, VALIDATION_ERRORS):
        message = format_validation_error(exc)
        logger.warning("request.validation_failed", view=view_name, error=message)
    else:
        message = str(exc)
        logger.exception("request.unhandled_error", view=view_name, error=message)

    return Response(
        error_body(message, bare),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
