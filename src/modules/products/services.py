"""Product service layer (Use Cases).

Orchestrates the catalog use-cases for the Product aggregate,
delegating persistence to the injected ``IProductRepository``.

Stock rules:
- ``adjust_stock`` is a read-modify-write (``stock -= quantity``) with no
  clamping at zero and no staleness check between the read and the write.
- ``decrement_stock`` (order fulfillment) is a single atomic UPDATE.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.products.constants import SAMPLE_CATALOG
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new catalog entry."""
        product = Product(**dto.model_dump())
        product = self._repo.save(product)
        logger.info("product.created", product_id=str(product.id))
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: UpdateProductDTO) -> Product:
        """Replace the supplied fields; ``updated_at`` is always refreshed.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)

        changes = dto.changes()
        for field, value in changes.items():
            setattr(product, field, value)

        product = self._repo.save(product)
        logger.info("product.updated", product_id=str(id), fields=sorted(changes))
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.delete(id):
            raise ProductNotFound(f"Product {id} not found.")

    def adjust_stock(self, id: str, quantity: int) -> Product:
        """Subtract *quantity* from the product's stock (admin correction).

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        product.stock -= quantity
        product = self._repo.save(product)
        logger.info(
            "product.stock_adjusted",
            product_id=str(id),
            quantity=quantity,
            stock=product.stock,
        )
        return product

    def decrement_stock(self, id: str, quantity: int) -> bool:
        """Fulfillment decrement; ``False`` when the product is gone."""
        touched = self._repo.decrement_stock(id, quantity)
        if touched:
            logger.info("product.stock_decremented", product_id=str(id), quantity=quantity)
        else:
            logger.warning("product.stock_decrement_missed", product_id=str(id))
        return touched

    def seed_sample_catalog(self) -> Optional[int]:
        """Insert the sample catalog into an empty store.

        Returns the number of inserted products, or ``None`` when the
        catalog already holds at least one product.
        """
        if self._repo.count() > 0:
            logger.info("product.seed_skipped")
            return None
        created = self._repo.bulk_create(Product(**data) for data in SAMPLE_CATALOG)
        logger.info("product.seeded", count=len(created))
        return len(created)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product, newest first."""
        return self._repo.list()

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        logger.info("product.retrieved", product_id=str(id))
        return product

    def _get_or_raise(self, id: str) -> Product:
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product
