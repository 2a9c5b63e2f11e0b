"""Unit tests for Product DTOs."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, StockAdjustmentDTO, UpdateProductDTO

pytestmark = pytest.mark.unit

VALID_PAYLOAD = {
    "name": "Mewtwo & Mew GX",
    "price": 45.99,
    "description": "Unified Minds Secret Rare",
    "image": "https://images.example.com/mewtwo.png",
    "marketPrice": 52.99,
    "marketUrl": "https://market.example.com/mewtwo",
    "marketSource": "TCGPlayer",
}


class TestCreateProductDTO:
    def test_accepts_camel_case_payload(self):
        dto = CreateProductDTO.model_validate(VALID_PAYLOAD)
        assert dto.market_price == Decimal("52.99")
        assert dto.market_source == "TCGPlayer"
        assert dto.stock == 0

    def test_dump_uses_model_field_names(self):
        data = CreateProductDTO.model_validate({**VALID_PAYLOAD, "stock": 8}).model_dump()
        assert data["market_url"] == "https://market.example.com/mewtwo"
        assert data["stock"] == 8

    @pytest.mark.parametrize("missing", ["name", "price", "image", "marketSource"])
    def test_required_fields(self, missing):
        payload = {k: v for k, v in VALID_PAYLOAD.items() if k != missing}
        with pytest.raises(ValidationError):
            CreateProductDTO.model_validate(payload)

    def test_is_frozen(self):
        dto = CreateProductDTO.model_validate(VALID_PAYLOAD)
        with pytest.raises(ValidationError):
            dto.name = "Other"


class TestUpdateProductDTO:
    def test_changes_only_supplied_fields(self):
        dto = UpdateProductDTO.model_validate({"price": 40, "marketSource": "eBay"})
        assert dto.changes() == {"price": Decimal("40"), "market_source": "eBay"}

    def test_null_values_ignored(self):
        dto = UpdateProductDTO.model_validate({"name": None, "stock": 3})
        assert dto.changes() == {"stock": 3}


class TestStockAdjustmentDTO:
    def test_quantity_required(self):
        with pytest.raises(ValidationError):
            StockAdjustmentDTO.model_validate({})

    def test_coerces_numeric_string(self):
        assert StockAdjustmentDTO.model_validate({"quantity": "2"}).quantity == 2
