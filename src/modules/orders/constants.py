"""Order domain constants.

Defines status choices and the transitions the payment workflow drives.
``REFUNDED`` exists for records changed outside this service (refunds
are issued manually from the gateway dashboard).
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    PAID = "paid", "Paid"
    FAILED = "failed", "Failed"
    REFUNDED = "refunded", "Refunded"


VALID_TRANSITIONS: dict[str, set[str]] = {
    OrderStatus.PENDING: {OrderStatus.PAID, OrderStatus.FAILED},
    OrderStatus.PAID: set(),
    OrderStatus.FAILED: set(),
    OrderStatus.REFUNDED: set(),
}

ORDER_ID_PREFIX = "ORD_"
ORDER_ID_MAX_RETRIES = 5

DEFAULT_LIST_LIMIT = 50

WEBHOOK_SIGNATURE_HEADER = "x-razorpay-signature"

EVENT_PAYMENT_CAPTURED = "payment.captured"
EVENT_PAYMENT_FAILED = "payment.failed"
