"""Order service layer (Use Cases).

Orchestrates checkout against the payment gateway, verification of the
signature the checkout widget hands back, and gateway webhooks.

Workflow rules:
- The gateway order is created **before** anything is persisted; a
  gateway failure leaves no local trace.
- Verification is correlated by the gateway order id.  A valid signature
  marks the order ``paid`` and decrements stock for every line item
  (best effort, a vanished product is skipped); an invalid one marks it
  ``failed`` and touches no stock.
- Status writes are not guarded by the current status (last write wins);
  unexpected transitions are only logged.
- Webhooks are authenticated and logged; they never mutate orders.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

import structlog
from django.conf import settings
from django.db import transaction

from modules.orders.constants import (
    DEFAULT_LIST_LIMIT,
    EVENT_PAYMENT_CAPTURED,
    EVENT_PAYMENT_FAILED,
    OrderStatus,
)
from modules.orders.events import OrderInitiated, OrderPaid, OrderPaymentFailed
from modules.orders.exceptions import OrderNotFound
from modules.payments.dtos import WebhookEventDTO
from modules.payments.events import PaymentCaptured, PaymentFailed
from modules.payments.exceptions import InvalidPaymentSignature, InvalidWebhookSignature
from modules.payments.signatures import verify_payment_signature, verify_webhook_signature
from shared.infrastructure.bus import event_bus

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderDTO, VerifyPaymentDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.payments.gateway import RazorpayGateway
    from modules.products.services import ProductService

logger = structlog.get_logger(__name__)


def _to_decimal(value: Optional[float]) -> Optional[Decimal]:
    return None if value is None else Decimal(str(value))


class OrderService:
    """Application service for the checkout and payment use-cases.

    Receives the order repository, the catalog service and the gateway
    client via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_service: ProductService,
        gateway: RazorpayGateway,
    ) -> None:
        self._order_repo = order_repository
        self._product_service = product_service
        self._gateway = gateway

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def initiate_order(self, dto: CreateOrderDTO) -> Tuple[Dict[str, Any], Order]:
        """Create the gateway order, then store a ``pending`` order.

        Returns the gateway's order document and the stored order.

        Raises:
            PaymentGatewayError: the gateway refused or was unreachable;
                nothing is persisted.
        """
        customer = dto.customer_info
        currency = dto.currency or settings.DEFAULT_CURRENCY
        log = logger.bind(amount=str(dto.amount), currency=currency)
        log.info("order.initiation_started", item_count=len(dto.items))

        razorpay_order = self._gateway.create_order(
            amount=dto.amount,
            currency=currency,
            notes={
                "store": settings.STORE_NAME,
                "customer_name": customer.name,
                "customer_email": customer.email,
            },
        )

        with transaction.atomic():
            order = self._order_repo.create(
                {
                    "razorpay_order_id": razorpay_order["id"],
                    "amount": dto.amount,
                    "currency": currency,
                    "customer": customer.snapshot(),
                    "items": [item.snapshot() for item in dto.items],
                    "delivery_type": customer.delivery_type,
                    "delivery_charge": _to_decimal(customer.delivery_charge),
                    "tax": _to_decimal(customer.tax),
                    "total": dto.amount,
                }
            )
            order.add_domain_event(
                OrderInitiated(
                    aggregate_id=order.id,
                    order_id=order.order_id,
                    razorpay_order_id=order.razorpay_order_id,
                )
            )
            self._order_repo.save(order)

        log.info(
            "order.initiated",
            order_id=order.order_id,
            razorpay_order_id=order.razorpay_order_id,
        )
        return razorpay_order, order

    def verify_payment(self, dto: VerifyPaymentDTO) -> Order:
        """Apply the checkout result to the matching order.

        Raises:
            OrderNotFound: no order carries ``dto.razorpay_order_id``.
            InvalidPaymentSignature: the signature does not verify; the
                order has been marked ``failed``.
        """
        order = self._order_repo.get_by_razorpay_order_id(dto.razorpay_order_id)
        if not order:
            raise OrderNotFound(f"Order for {dto.razorpay_order_id} not found.")

        log = logger.bind(
            order_id=order.order_id,
            razorpay_order_id=dto.razorpay_order_id,
            current_status=order.status,
        )

        is_valid = verify_payment_signature(
            dto.razorpay_order_id,
            dto.razorpay_payment_id,
            dto.razorpay_signature,
            settings.RAZORPAY_KEY_SECRET,
        )

        if not is_valid:
            self._warn_on_unexpected_transition(order, OrderStatus.FAILED, log)
            order.add_domain_event(
                OrderPaymentFailed(aggregate_id=order.id, order_id=order.order_id)
            )
            self._order_repo.update(order, {"status": OrderStatus.FAILED})
            log.warning("payment.signature_mismatch")
            raise InvalidPaymentSignature(
                f"Invalid payment signature for {dto.razorpay_order_id}."
            )

        self._warn_on_unexpected_transition(order, OrderStatus.PAID, log)
        with transaction.atomic():
            order.add_domain_event(
                OrderPaid(
                    aggregate_id=order.id,
                    order_id=order.order_id,
                    razorpay_payment_id=dto.razorpay_payment_id,
                )
            )
            self._order_repo.update(
                order,
                {
                    "status": OrderStatus.PAID,
                    "razorpay_payment_id": dto.razorpay_payment_id,
                    "razorpay_signature": dto.razorpay_signature,
                },
            )
            for item in order.items:
                self._product_service.decrement_stock(
                    str(item.get("productId", "")), int(item.get("quantity", 0))
                )

        log.info("payment.verified", razorpay_payment_id=dto.razorpay_payment_id)
        return order

    def handle_webhook(self, body: Any, signature: Optional[str]) -> Optional[str]:
        """Authenticate a gateway webhook and publish its payment event.

        Returns the event name.

        Raises:
            InvalidWebhookSignature: the header does not match the body.
        """
        if not verify_webhook_signature(
            body, signature, settings.RAZORPAY_WEBHOOK_SECRET
        ):
            logger.warning("webhook.signature_mismatch")
            raise InvalidWebhookSignature("Invalid webhook signature.")

        event_name = body.get("event") if isinstance(body, dict) else None

        if event_name == EVENT_PAYMENT_CAPTURED:
            payment = WebhookEventDTO.model_validate(body).payment
            event_bus.publish(
                PaymentCaptured(
                    aggregate_id=payment.id,
                    razorpay_order_id=payment.order_id or "",
                )
            )
        elif event_name == EVENT_PAYMENT_FAILED:
            payment = WebhookEventDTO.model_validate(body).payment
            event_bus.publish(
                PaymentFailed(
                    aggregate_id=payment.id,
                    razorpay_order_id=payment.order_id or "",
                )
            )
        else:
            logger.info("webhook.event_ignored", webhook_event=event_name)

        return event_name

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Order:
        """Retrieve a single order by its ``ORD_...`` id.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_order_id(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    def list_orders(
        self, status: Optional[str] = None, limit: int = DEFAULT_LIST_LIMIT
    ) -> List[Order]:
        """Return orders newest first, optionally filtered by status."""
        return self._order_repo.list(status=status, limit=limit)

    @staticmethod
    def _warn_on_unexpected_transition(order: Order, new_status: str, log: Any) -> None:
        if not order.can_transition_to(new_status):
            log.warning("order.unexpected_transition", new_status=new_status)
