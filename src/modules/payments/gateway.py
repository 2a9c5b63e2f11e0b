"""Razorpay Orders API client.

Only the call the storefront needs is implemented: creating a remote
order that the client-side checkout then pays.  The response is handed
back untouched; callers only rely on its ``id``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests
import structlog
from django.conf import settings
from django.utils import timezone

from modules.payments.exceptions import PaymentGatewayError
from modules.payments.signatures import Amount, to_minor_units

logger = structlog.get_logger(__name__)


class RazorpayGateway:
    """Thin wrapper around ``POST /v1/orders``.

    Credentials default to the ``RAZORPAY_*`` settings; tests and scripts
    may inject their own.
    """

    def __init__(
        self,
        key_id: Optional[str] = None,
        key_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> None:
        self.key_id = key_id if key_id is not None else settings.RAZORPAY_KEY_ID
        self.key_secret = (
            key_secret if key_secret is not None else settings.RAZORPAY_KEY_SECRET
        )
        self.base_url = (base_url or settings.RAZORPAY_API_BASE).rstrip("/")
        self.timeout = timeout or settings.RAZORPAY_TIMEOUT

    @staticmethod
    def build_receipt() -> str:
        return f"receipt_{int(timezone.now().timestamp() * 1000)}"

    def create_order(
        self,
        amount: Amount,
        currency: str,
        notes: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Create a remote order for *amount* (store units) in *currency*.

        Raises:
            PaymentGatewayError: transport failure or non-2xx answer.
        """
        payload = {
            "amount": to_minor_units(amount),
            "currency": currency,
            "receipt": self.build_receipt(),
            "notes": notes,
        }
        log = logger.bind(receipt=payload["receipt"], amount=payload["amount"])

        try:
            response = requests.post(
                f"{self.base_url}/orders",
                json=payload,
                auth=(self.key_id, self.key_secret),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            log.error("gateway.order_request_failed", error=str(exc))
            raise PaymentGatewayError(f"Payment gateway unreachable: {exc}") from exc

        if response.status_code not in (200, 201):
            description = _error_description(response)
            log.error(
                "gateway.order_rejected",
                status_code=response.status_code,
                error=description,
            )
            raise PaymentGatewayError(description)

        data = response.json()
        log.info("gateway.order_created", razorpay_order_id=data.get("id"))
        return data


def _error_description(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"Payment gateway returned {response.status_code}"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("description"):
        return str(error["description"])
    return f"Payment gateway returned {response.status_code}"
