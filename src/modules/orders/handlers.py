"""Event handlers for Orders domain events."""

from __future__ import annotations

import structlog

from modules.orders.events import OrderInitiated, OrderPaid, OrderPaymentFailed
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class OrderInitiatedHandler(IEventHandler[OrderInitiated]):
    def handle(self, event: OrderInitiated) -> None:
        logger.info(
            "order.event.initiated",
            order_id=event.order_id,
            razorpay_order_id=event.razorpay_order_id,
        )


class OrderPaidHandler(IEventHandler[OrderPaid]):
    def handle(self, event: OrderPaid) -> None:
        logger.info(
            "order.event.paid",
            order_id=event.order_id,
            razorpay_payment_id=event.razorpay_payment_id,
        )


class OrderPaymentFailedHandler(IEventHandler[OrderPaymentFailed]):
    def handle(self, event: OrderPaymentFailed) -> None:
        logger.warning("order.event.payment_failed", order_id=event.order_id)


order_initiated_handler = OrderInitiatedHandler()
order_paid_handler = OrderPaidHandler()
order_payment_failed_handler = OrderPaymentFailedHandler()
