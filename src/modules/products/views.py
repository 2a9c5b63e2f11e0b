"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes.  DTO validation errors are left to the project
exception handler, which answers them with 500 and the raw message.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import CreateProductDTO, StockAdjustmentDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


def _not_found() -> Response:
    return Response(
        {"success": False, "message": "Product not found"},
        status=status.HTTP_404_NOT_FOUND,
    )


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response(
            {"success": True, "products": ProductSerializer(products, many=True).data}
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return _not_found()
        return Response({"success": True, "product": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        dto = CreateProductDTO.model_validate(request.data)
        product = self._service.create_product(dto)
        return Response(
            {"success": True, "product": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        dto = UpdateProductDTO.model_validate(request.data)
        try:
            product = self._service.update_product(pk, dto)
        except ProductNotFound:
            return _not_found()
        return Response({"success": True, "product": ProductSerializer(product).data})

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/products/{pk}"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            self._service.delete_product(pk)
        except ProductNotFound:
            return _not_found()
        return Response({"success": True, "message": "Product deleted"})

    @action(detail=True, methods=["patch"], url_path="stock")
    def update_stock(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/products/{pk}/stock

        Body ``{"quantity": N}``; the stock is decreased by ``N``.
        """
        dto = StockAdjustmentDTO.model_validate(request.data)
        try:
            product = self._service.adjust_stock(pk, dto.quantity)
        except ProductNotFound:
            return _not_found()
        return Response({"success": True, "product": ProductSerializer(product).data})


class InitializeCatalogView(APIView):
    """POST /api/initialize: one-time sample catalog seeding."""

    def post(self, request: Request) -> Response:
        count = ProductService(repository=ProductDjangoRepository()).seed_sample_catalog()
        if count is None:
            return Response(
                {"success": False, "message": "Database already initialized"}
            )
        return Response(
            {"success": True, "message": "Sample products added", "count": count}
        )
