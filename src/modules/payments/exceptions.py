"""Payment domain exceptions.

Raised by the gateway adapter and the signature helpers.  The Order
workflow lets them propagate; the API layer translates them into HTTP
responses.
"""

from __future__ import annotations


class PaymentGatewayError(Exception):
    """The payment gateway rejected the request or could not be reached."""


class InvalidPaymentSignature(Exception):
    """The checkout signature does not match ``order_id|payment_id``."""


class InvalidWebhookSignature(Exception):
    """The ``x-razorpay-signature`` header does not match the webhook body."""
