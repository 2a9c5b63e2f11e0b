from __future__ import annotations

import hashlib
import hmac
from decimal import Decimal

import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_product():
    """Factory for persisted products with sensible catalog defaults."""

    def _make(**overrides):
        from modules.products.models import Product

        defaults = {
            "name": "Charizard VMAX",
            "price": Decimal("299.99"),
            "stock": 5,
            "description": "Rainbow Rare",
            "image": "https://images.example.com/charizard.png",
            "market_price": Decimal("349.99"),
            "market_url": "https://market.example.com/charizard",
            "market_source": "TCGPlayer",
        }
        defaults.update(overrides)
        product = Product(**defaults)
        product.save()
        return product

    return _make


@pytest.fixture()
def sign():
    """HMAC-SHA256 hex digest helper, independent of the code under test."""

    def _sign(secret: str, message: str) -> str:
        return hmac.new(
            secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256
        ).hexdigest()

    return _sign
