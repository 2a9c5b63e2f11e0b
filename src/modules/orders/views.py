"""Order and payment API views.

Exposes the ``OrderService`` via HTTP.  Domain exceptions are caught
and translated into the storefront's envelopes; DTO validation and
gateway errors propagate to the project exception handler.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet

from modules.orders.constants import WEBHOOK_SIGNATURE_HEADER
from modules.orders.dtos import CreateOrderDTO, ListOrdersDTO, VerifyPaymentDTO
from modules.orders.exceptions import OrderNotFound
from modules.orders.models import Order
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.serializers import OrderSerializer
from modules.orders.services import OrderService
from modules.payments.exceptions import InvalidPaymentSignature, InvalidWebhookSignature
from modules.payments.gateway import RazorpayGateway
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


def build_order_service() -> OrderService:
    return OrderService(
        order_repository=OrderDjangoRepository(),
        product_service=ProductService(repository=ProductDjangoRepository()),
        gateway=RazorpayGateway(),
    )


def _not_found() -> Response:
    return Response(
        {"success": False, "message": "Order not found"},
        status=status.HTTP_404_NOT_FOUND,
    )


class OrderViewSet(GenericViewSet):
    """Read-only order listing for the admin dashboard.

    Orders are addressed by their ``ORD_...`` id, never by primary key.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    lookup_field = "order_id"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_order_service()

    def list(self, request: Request) -> Response:
        """GET /api/orders?status=&limit="""
        query = ListOrdersDTO.model_validate(request.query_params.dict())
        orders = self._service.list_orders(status=query.status, limit=query.limit)
        return Response(
            {
                "success": True,
                "orders": OrderSerializer(orders, many=True).data,
                "count": len(orders),
            }
        )

    def retrieve(self, request: Request, order_id: str | None = None) -> Response:
        """GET /api/orders/{orderId}"""
        try:
            order = self._service.get_order(order_id)
        except OrderNotFound:
            return _not_found()
        return Response({"success": True, "order": OrderSerializer(order).data})


class CreateOrderView(APIView):
    """POST /api/create-order: open a gateway order and store it as pending."""

    def post(self, request: Request) -> Response:
        dto = CreateOrderDTO.model_validate(request.data)
        razorpay_order, order = build_order_service().initiate_order(dto)
        return Response(
            {
                "success": True,
                "razorpayOrder": razorpay_order,
                "orderId": order.order_id,
            }
        )


class VerifyPaymentView(APIView):
    """POST /api/verify-payment: check the checkout signature."""

    def post(self, request: Request) -> Response:
        dto = VerifyPaymentDTO.model_validate(request.data)
        try:
            order = build_order_service().verify_payment(dto)
        except OrderNotFound:
            return _not_found()
        except InvalidPaymentSignature:
            return Response(
                {"success": False, "message": "Invalid payment signature"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(
            {
                "success": True,
                "message": "Payment verified successfully",
                "order": OrderSerializer(order).data,
            }
        )


class WebhookView(APIView):
    """POST /api/webhook: gateway-to-server notifications."""

    bare_error_envelope = True

    def post(self, request: Request) -> Response:
        signature = request.headers.get(WEBHOOK_SIGNATURE_HEADER)
        try:
            build_order_service().handle_webhook(request.data, signature)
        except InvalidWebhookSignature:
            return Response(
                {"error": "Invalid signature"}, status=status.HTTP_403_FORBIDDEN
            )
        return Response({"status": "ok"})
