"""Product URL configuration."""

from __future__ import annotations

from django.urls import path
from rest_framework.routers import SimpleRouter

from modules.products.views import InitializeCatalogView, ProductViewSet

router = SimpleRouter(trailing_slash=False)
router.register("products", ProductViewSet, basename="product")

urlpatterns = [
    path("initialize", InitializeCatalogView.as_view(), name="initialize"),
    *router.urls,
]
