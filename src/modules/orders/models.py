"""Order model.

An order is a self-contained document: the customer record and the
line items are embedded JSON snapshots taken at checkout time, never
live references to ``Product`` rows.

- ``order_id`` is the human-readable identifier (``ORD_<epoch ms>``)
  generated on first save.
- ``razorpay_order_id`` is assigned by the gateway before the order is
  persisted and is the correlation key of the payment flow; it is
  unique and never rewritten.
- ``razorpay_payment_id`` / ``razorpay_signature`` are filled in only
  after a successful payment verification.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.db import models
from django.utils import timezone

from modules.core.models import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS, BaseModel
from modules.orders.constants import (
    ORDER_ID_MAX_RETRIES,
    ORDER_ID_PREFIX,
    VALID_TRANSITIONS,
    OrderStatus,
)
from shared.domain.events import DomainEventMixin

logger = structlog.get_logger(__name__)


class Order(DomainEventMixin, BaseModel):
    """Order aggregate root."""

    order_id: models.CharField = models.CharField(
        max_length=32, unique=True, editable=False
    )
    razorpay_order_id: models.CharField = models.CharField(max_length=64, unique=True)
    razorpay_payment_id: models.CharField = models.CharField(
        max_length=64, blank=True, default=""
    )
    razorpay_signature: models.CharField = models.CharField(
        max_length=128, blank=True, default=""
    )
    amount: models.DecimalField = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    currency: models.CharField = models.CharField(max_length=8, default="INR")
    status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )
    customer: models.JSONField = models.JSONField(default=dict)
    items: models.JSONField = models.JSONField(default=list)
    delivery_type: models.CharField = models.CharField(
        max_length=50, blank=True, default=""
    )
    delivery_charge: models.DecimalField = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        null=True,
        blank=True,
    )
    tax: models.DecimalField = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        null=True,
        blank=True,
    )
    total: models.DecimalField = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    def can_transition_to(self, new_status: str) -> bool:
        """Check whether the payment workflow expects *new_status* next."""
        allowed = VALID_TRANSITIONS.get(self.status, set())
        return new_status in allowed

    # ------------------------------------------------------------------
    # Order id generation
    # ------------------------------------------------------------------

    @staticmethod
    def generate_order_id(offset: int = 0) -> str:
        """Generate a human-readable order id: ``ORD_<epoch milliseconds>``."""
        millis = int(timezone.now().timestamp() * 1000) + offset
        return f"{ORDER_ID_PREFIX}{millis}"

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args: Any, **kwargs: Any) -> None:
        if not self.order_id:
            for attempt in range(ORDER_ID_MAX_RETRIES):
                candidate = self.generate_order_id(offset=attempt)
                if not Order.objects.filter(order_id=candidate).exists():
                    self.order_id = candidate
                    break
            else:
                raise RuntimeError(
                    f"Failed to generate unique order_id after "
                    f"{ORDER_ID_MAX_RETRIES} attempts"
                )
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.order_id} ({self.status})"
