"""Order repository interface.

Extends ``IRepository[Order]`` with the look-ups the payment workflow
needs: by human-readable ``order_id`` and by the gateway's order id
(the correlation key of verification), plus field updates.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order; the status is always ``pending``."""

    @abstractmethod
    def get_by_order_id(self, order_id: str) -> Optional[Order]:
        """Retrieve an order by its human-readable id (``ORD_...``)."""

    @abstractmethod
    def get_by_razorpay_order_id(self, razorpay_order_id: str) -> Optional[Order]:
        """Retrieve the (single) order created for a gateway order."""

    @abstractmethod
    def list(self, status: Optional[str] = None, limit: Optional[int] = None) -> List[Order]:
        """Orders newest first, optionally filtered by status and capped."""

    @abstractmethod
    def update(self, order: Order, fields: Dict[str, Any]) -> Order:
        """Write *fields* onto *order* (last write wins)."""
