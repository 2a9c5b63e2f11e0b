"""Unit tests for ProductService.

Covers:
- create_product / update_product / delete_product.
- adjust_stock: read-modify-write without clamping.
- decrement_stock: delegation and miss reporting.
- seed_sample_catalog: only on an empty catalog.
- get_product / list_products.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda p: p
    return repo


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _product(**overrides) -> Product:
    defaults = {
        "name": "Pikachu VMAX",
        "price": Decimal("89.99"),
        "stock": 12,
        "description": "Vivid Voltage",
        "image": "https://images.example.com/pikachu.png",
        "market_price": Decimal("95.99"),
        "market_url": "https://market.example.com/pikachu",
        "market_source": "TCGPlayer",
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, mock_repo):
        dto = CreateProductDTO(
            name="Pikachu VMAX",
            price=Decimal("89.99"),
            description="Vivid Voltage",
            image="https://images.example.com/pikachu.png",
            marketPrice=Decimal("95.99"),
            marketUrl="https://market.example.com/pikachu",
            marketSource="TCGPlayer",
        )
        product = service.create_product(dto)

        assert product.name == "Pikachu VMAX"
        assert product.market_source == "TCGPlayer"
        assert product.stock == 0
        mock_repo.save.assert_called_once()


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_only_supplied_fields_change(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()

        updated = service.update_product("p1", UpdateProductDTO(price=Decimal("79.99")))

        assert updated.price == Decimal("79.99")
        assert updated.name == "Pikachu VMAX"
        mock_repo.save.assert_called_once()

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.update_product("missing", UpdateProductDTO(name="x"))
        mock_repo.save.assert_not_called()


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_success(self, service, mock_repo):
        mock_repo.delete.return_value = True
        service.delete_product("p1")
        mock_repo.delete.assert_called_once_with("p1")

    def test_not_found(self, service, mock_repo):
        mock_repo.delete.return_value = False
        with pytest.raises(ProductNotFound):
            service.delete_product("missing")


# ===========================================================================
# Stock
# ===========================================================================


class TestAdjustStock:
    def test_subtracts_quantity(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product(stock=12)
        assert service.adjust_stock("p1", 5).stock == 7

    def test_goes_negative(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product(stock=2)
        assert service.adjust_stock("p1", 5).stock == -3

    def test_negative_quantity_adds(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product(stock=2)
        assert service.adjust_stock("p1", -3).stock == 5

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.adjust_stock("missing", 1)


class TestDecrementStock:
    def test_delegates_to_atomic_update(self, service, mock_repo):
        mock_repo.decrement_stock.return_value = True
        assert service.decrement_stock("p1", 2) is True
        mock_repo.decrement_stock.assert_called_once_with("p1", 2)

    def test_missing_product_reported(self, service, mock_repo):
        mock_repo.decrement_stock.return_value = False
        assert service.decrement_stock("gone", 2) is False


# ===========================================================================
# seed_sample_catalog
# ===========================================================================


class TestSeedSampleCatalog:
    def test_seeds_empty_catalog(self, service, mock_repo):
        mock_repo.count.return_value = 0
        mock_repo.bulk_create.side_effect = lambda products: list(products)

        assert service.seed_sample_catalog() == 3
        mock_repo.bulk_create.assert_called_once()

    def test_skips_non_empty_catalog(self, service, mock_repo):
        mock_repo.count.return_value = 1
        assert service.seed_sample_catalog() is None
        mock_repo.bulk_create.assert_not_called()


# ===========================================================================
# Queries
# ===========================================================================


class TestQueries:
    def test_get_product(self, service, mock_repo):
        product = _product()
        mock_repo.get_by_id.return_value = product
        assert service.get_product("p1") is product

    def test_get_product_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.get_product("missing")

    def test_list_products(self, service, mock_repo):
        mock_repo.list.return_value = [_product(), _product(name="Mew")]
        assert len(service.list_products()) == 2
