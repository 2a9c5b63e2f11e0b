"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.

Updates are plain field writes: there is no compare-and-swap on the
previous status, so two concurrent verifications of the same order
resolve as last-write-wins.  Domain events collected on the aggregate
are published on the in-process event bus after every write.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.orders.constants import OrderStatus
from modules.orders.filters import OrderFilter
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository
from shared.infrastructure.bus import event_bus

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order in ``pending`` status.

        ``data`` keys mirror the model fields; ``status`` is ignored.
        """
        fields = {key: value for key, value in data.items() if key != "status"}
        order = Order(status=OrderStatus.PENDING, **fields)
        order.save()

        log = logger.bind(order_id=order.order_id, item_count=len(order.items))
        log.info("order.created")
        return order

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    @transaction.atomic
    def update(self, order: Order, fields: Dict[str, Any]) -> Order:
        """Write *fields* onto *order* and persist only those columns."""
        for field, value in fields.items():
            setattr(order, field, value)

        order.save(update_fields=list(fields))
        logger.info("order.updated", order_id=order.order_id, fields=sorted(fields))
        self._publish_events(order)
        return order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order by primary key; ``None`` for invalid IDs."""
        try:
            return Order.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_order_id(self, order_id: str) -> Optional[Order]:
        return Order.objects.filter(order_id=order_id).first()

    def get_by_razorpay_order_id(self, razorpay_order_id: str) -> Optional[Order]:
        return Order.objects.filter(razorpay_order_id=razorpay_order_id).first()

    def list(self, status: Optional[str] = None, limit: Optional[int] = None) -> List[Order]:
        """Orders newest first.

        ``status`` is matched exactly; an unknown status yields no rows.
        """
        queryset = OrderFilter(
            {"status": status} if status else {},
            queryset=Order.objects.order_by("-created_at", "-id"),
        ).qs
        if limit is not None:
            queryset = queryset[:limit]
        return list(queryset)

    # ------------------------------------------------------------------
    # Save (IRepository contract)
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist (create or update) an order."""
        entity.save()
        logger.info("order.saved", order_id=entity.order_id)
        self._publish_events(entity)
        return entity

    @staticmethod
    def _publish_events(entity: Order) -> None:
        event_bus.publish_all(entity.pull_domain_events())
