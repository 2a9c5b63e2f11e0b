"""Domain events raised by verified gateway webhooks."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class PaymentCaptured(DomainEvent):
    """``payment.captured``: the gateway settled a payment."""

    razorpay_order_id: str = ""


@dataclass(frozen=True)
class PaymentFailed(DomainEvent):
    """``payment.failed``: the gateway reports a failed payment attempt."""

    razorpay_order_id: str = ""
