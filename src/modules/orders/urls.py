"""Order and payment URL configuration."""

from __future__ import annotations

from django.urls import path
from rest_framework.routers import SimpleRouter

from modules.orders.views import (
    CreateOrderView,
    OrderViewSet,
    VerifyPaymentView,
    WebhookView,
)

router = SimpleRouter(trailing_slash=False)
router.register("orders", OrderViewSet, basename="order")

urlpatterns = [
    path("create-order", CreateOrderView.as_view(), name="create-order"),
    path("verify-payment", VerifyPaymentView.as_view(), name="verify-payment"),
    path("webhook", WebhookView.as_view(), name="webhook"),
    *router.urls,
]
