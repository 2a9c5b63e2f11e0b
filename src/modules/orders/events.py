"""Domain events for the Orders bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class OrderInitiated(DomainEvent):
    """Raised when a pending order is stored after the gateway accepted it."""

    order_id: str = ""
    razorpay_order_id: str = ""


@dataclass(frozen=True)
class OrderPaid(DomainEvent):
    """Raised when a checkout signature verifies and the order is paid."""

    order_id: str = ""
    razorpay_payment_id: str = ""


@dataclass(frozen=True)
class OrderPaymentFailed(DomainEvent):
    """Raised when a checkout signature does not verify."""

    order_id: str = ""
