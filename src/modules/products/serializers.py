"""Product DRF serializers for API output.

Field names follow the storefront client's camelCase contract
(``_id``, ``marketPrice``, ``createdAt``).  Input validation lives in
the Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.core.serializers import MoneyField
from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    _id = serializers.UUIDField(source="id", read_only=True)
    price = MoneyField()
    marketPrice = MoneyField(source="market_price")
    marketUrl = serializers.CharField(source="market_url", read_only=True)
    marketSource = serializers.CharField(source="market_source", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = [
            "_id",
            "name",
            "price",
            "stock",
            "description",
            "image",
            "marketPrice",
            "marketUrl",
            "marketSource",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
