"""Product repository interface.

Extends ``IRepository[Product]`` with the deletion, counting and
stock operations the catalog and the order fulfillment path need.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove a product; ``False`` when nothing was deleted."""

    @abstractmethod
    def count(self) -> int:
        """Number of products in the catalog."""

    @abstractmethod
    def bulk_create(self, products: Iterable[Product]) -> List[Product]:
        """Insert several products at once."""

    @abstractmethod
    def decrement_stock(self, id: str, quantity: int) -> bool:
        """Atomically run ``stock = stock - quantity`` in the database.

        Returns ``False`` if no product matched *id*.
        """
