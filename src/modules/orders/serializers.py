"""Order DRF serializers for API output.

Field names follow the storefront client's camelCase contract.  The
embedded ``customer`` and ``items`` documents are returned exactly as
they were snapshotted at checkout.  Input validation lives in the
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.core.serializers import MoneyField
from modules.orders.models import Order


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for the Order resource."""

    _id = serializers.UUIDField(source="id", read_only=True)
    orderId = serializers.CharField(source="order_id", read_only=True)
    razorpayOrderId = serializers.CharField(source="razorpay_order_id", read_only=True)
    razorpayPaymentId = serializers.CharField(
        source="razorpay_payment_id", read_only=True
    )
    razorpaySignature = serializers.CharField(
        source="razorpay_signature", read_only=True
    )
    deliveryType = serializers.CharField(source="delivery_type", read_only=True)
    amount = MoneyField()
    deliveryCharge = MoneyField(source="delivery_charge", allow_null=True)
    tax = MoneyField(allow_null=True)
    total = MoneyField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Order
        fields = [
            "_id",
            "orderId",
            "razorpayOrderId",
            "razorpayPaymentId",
            "razorpaySignature",
            "amount",
            "currency",
            "status",
            "customer",
            "items",
            "deliveryType",
            "deliveryCharge",
            "tax",
            "total",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
