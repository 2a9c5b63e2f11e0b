"""Razorpay signature and amount helpers.

Checkout signature
    ``hex(HMAC_SHA256(key_secret, "{razorpay_order_id}|{razorpay_payment_id}"))``

Webhook signature
    ``hex(HMAC_SHA256(webhook_secret, <body>))`` where ``<body>`` is the
    parsed request body serialized back to compact JSON, exactly the way
    ``JSON.stringify`` renders it.  Field order is preserved by the JSON
    parser, whitespace is not; a body that was not sent in compact form
    will not verify.

Minor units
    ``Math.round(amount * 100)`` on IEEE doubles: half-way values round
    toward positive infinity, and the binary representation of the
    amount decides what counts as half-way (``1.005`` becomes ``100``).
"""

from __future__ import annotations

import hashlib
import hmac
import json
import math
from decimal import Decimal
from typing import Any, Union

import structlog
from django.core.exceptions import ImproperlyConfigured

logger = structlog.get_logger(__name__)

Amount = Union[Decimal, float, int]


def to_minor_units(amount: Amount) -> int:
    """Convert a store amount to gateway minor units (paise for INR)."""
    scaled = float(amount) * 100
    lower = math.floor(scaled)
    return lower + 1 if scaled - lower >= 0.5 else lower


def compute_signature(secret: str, message: str) -> str:
    """Return the hex HMAC-SHA256 of *message* keyed with *secret*."""
    if not secret:
        logger.error("payments.signature_secret_missing")
        raise ImproperlyConfigured("A Razorpay secret is required to compute signatures")
    return hmac.new(
        secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256
    ).hexdigest()


def _matches(expected: str, received: str | None) -> bool:
    return hmac.compare_digest(expected.encode("utf-8"), (received or "").encode("utf-8"))


def verify_payment_signature(
    razorpay_order_id: str,
    razorpay_payment_id: str,
    signature: str | None,
    secret: str,
) -> bool:
    """Check the signature returned by the client-side checkout."""
    expected = compute_signature(secret, f"{razorpay_order_id}|{razorpay_payment_id}")
    return _matches(expected, signature)


def serialize_webhook_body(body: Any) -> str:
    """Serialize a parsed webhook body the way ``JSON.stringify`` does."""
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def verify_webhook_signature(body: Any, signature: str | None, secret: str) -> bool:
    """Check the ``x-razorpay-signature`` header against the parsed body."""
    expected = compute_signature(secret, serialize_webhook_body(body))
    return _matches(expected, signature)
