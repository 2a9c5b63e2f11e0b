"""Webhook event handlers.

Webhook events are recorded in the log only; order status is driven by
the checkout verification call.
"""

from __future__ import annotations

import structlog

from modules.payments.events import PaymentCaptured, PaymentFailed
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class PaymentCapturedHandler(IEventHandler[PaymentCaptured]):
    def handle(self, event: PaymentCaptured) -> None:
        logger.info(
            "webhook.payment_captured",
            payment_id=str(event.aggregate_id),
            razorpay_order_id=event.razorpay_order_id,
        )


class PaymentFailedHandler(IEventHandler[PaymentFailed]):
    def handle(self, event: PaymentFailed) -> None:
        logger.warning(
            "webhook.payment_failed",
            payment_id=str(event.aggregate_id),
            razorpay_order_id=event.razorpay_order_id,
        )


payment_captured_handler = PaymentCapturedHandler()
payment_failed_handler = PaymentFailedHandler()
