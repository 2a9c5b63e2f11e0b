"""Product model for the trading-card catalog.

Besides the store price, each product carries an informational market
reference (price, URL and source) shown next to it for comparison.

``stock`` is a signed integer: fulfillment and admin corrections
subtract from it without clamping, so it may go negative.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS, BaseModel


class Product(BaseModel):
    """Catalog entry."""

    name = models.CharField(max_length=255)
    price = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    stock = models.IntegerField(default=0)
    description = models.TextField()
    image = models.URLField(max_length=500)
    market_price = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    market_url = models.URLField(max_length=500)
    market_source = models.CharField(max_length=100)

    class Meta:
        db_table = "products"
        ordering = ["-created_at", "-id"]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.stock} in stock)"
