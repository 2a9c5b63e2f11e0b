"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
(or ``False``) instead of raising HTTP-level exceptions; the Service
Layer decides how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self) -> List[Product]:
        """All products, newest first."""
        return list(Product.objects.order_by("-created_at", "-id"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.debug(
            "product.saved",
            product_id=str(entity.id),
            stock=entity.stock,
        )
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if the product was found and deleted,
        ``False`` if no product exists with the given ID.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        logger.info("product.deleted", product_id=str(id))
        return True

    def count(self) -> int:
        return Product.objects.count()

    @transaction.atomic
    def bulk_create(self, products: Iterable[Product]) -> List[Product]:
        created = Product.objects.bulk_create(list(products))
        logger.info("product.bulk_created", count=len(created))
        return created

    def decrement_stock(self, id: str, quantity: int) -> bool:
        """Single ``UPDATE`` statement; concurrent decrements never lose updates."""
        try:
            updated = Product.objects.filter(id=id).update(
                stock=F("stock") - quantity,
                updated_at=timezone.now(),
            )
        except (ValueError, ValidationError):
            return False
        return updated > 0
