"""Unit tests for OrderDjangoRepository (database backed)."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.orders.constants import OrderStatus
from modules.orders.events import OrderPaid
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from shared.infrastructure.bus import event_bus

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return OrderDjangoRepository()


def _create(repo, razorpay_order_id: str = "order_1", **overrides) -> Order:
    data = {
        "razorpay_order_id": razorpay_order_id,
        "amount": Decimal("500.00"),
        "total": Decimal("500.00"),
        "items": [{"productId": "p1", "name": "Card", "price": 500.0, "quantity": 1}],
    }
    data.update(overrides)
    return repo.create(data)


class TestCreate:
    def test_always_pending(self, repo):
        order = _create(repo, status=OrderStatus.PAID)
        assert order.status == OrderStatus.PENDING
        assert order.order_id.startswith("ORD_")

    def test_razorpay_order_id_unique(self, repo):
        from django.db import IntegrityError

        _create(repo, "order_dup")
        with pytest.raises(IntegrityError):
            _create(repo, "order_dup")


class TestLookups:
    def test_by_order_id(self, repo):
        order = _create(repo)
        assert repo.get_by_order_id(order.order_id) == order
        assert repo.get_by_order_id("ORD_0") is None

    def test_by_razorpay_order_id(self, repo):
        order = _create(repo, "order_xyz")
        assert repo.get_by_razorpay_order_id("order_xyz") == order
        assert repo.get_by_razorpay_order_id("order_none") is None

    def test_by_id_malformed(self, repo):
        assert repo.get_by_id("nope") is None


class TestList:
    def test_newest_first_with_limit(self, repo):
        orders = [_create(repo, f"order_{i}") for i in range(3)]
        listed = repo.list(limit=2)
        assert [o.id for o in listed] == [orders[2].id, orders[1].id]

    def test_status_filter(self, repo):
        paid = _create(repo, "order_paid")
        _create(repo, "order_pending")
        repo.update(paid, {"status": OrderStatus.PAID})

        assert [o.id for o in repo.list(status=OrderStatus.PAID)] == [paid.id]

    def test_unknown_status_matches_nothing(self, repo):
        _create(repo)
        assert repo.list(status="shipped") == []


class TestUpdate:
    def test_writes_fields_and_refreshes_updated_at(self, repo):
        order = _create(repo)
        before = order.updated_at

        repo.update(order, {"status": OrderStatus.PAID, "razorpay_payment_id": "pay_1"})

        stored = Order.objects.get(id=order.id)
        assert stored.status == OrderStatus.PAID
        assert stored.razorpay_payment_id == "pay_1"
        assert stored.updated_at >= before

    def test_last_write_wins(self, repo):
        order = _create(repo)
        repo.update(order, {"status": OrderStatus.PAID})
        repo.update(order, {"status": OrderStatus.FAILED})
        assert Order.objects.get(id=order.id).status == OrderStatus.FAILED

    def test_publishes_collected_events(self, repo):
        order = _create(repo)
        handler = MagicMock()
        event_bus.subscribe(OrderPaid, handler)
        try:
            event = OrderPaid(aggregate_id=order.id, order_id=order.order_id)
            order.add_domain_event(event)
            repo.update(order, {"status": OrderStatus.PAID})
        finally:
            event_bus._handlers[OrderPaid].remove(handler)

        handler.handle.assert_called_once_with(event)
        assert order.domain_events == []
