"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Order workflow.
DTOs are immutable (``frozen=True``) and accept the storefront's wire
names (``customerInfo``, ``productId``, ``razorpay_order_id``).

- ``AddressDTO`` / ``CustomerInfoDTO``: checkout customer block.
- ``LineItemDTO``: one cart line, snapshotted into the order.
- ``CreateOrderDTO``: input of ``POST /api/create-order``.
- ``VerifyPaymentDTO``: input of ``POST /api/verify-payment``.
- ``ListOrdersDTO``: query of ``GET /api/orders``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.orders.constants import DEFAULT_LIST_LIMIT

_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------


class AddressDTO(BaseModel):
    model_config = _CONFIG

    line1: Optional[str] = None
    line2: Optional[str] = None
    landmark: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None


class CustomerInfoDTO(BaseModel):
    """Customer block of a checkout request.

    Delivery type, delivery charge and tax travel inside the customer
    block on the wire; they are stored on the order itself.
    """

    model_config = _CONFIG

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[AddressDTO] = None
    delivery_type: str = Field(alias="deliveryType")
    delivery_charge: float = Field(alias="deliveryCharge")
    tax: float

    def snapshot(self) -> Dict[str, Any]:
        """Embedded customer record stored on the order."""
        return self.model_dump(
            include={"name", "email", "phone", "address"}, mode="json"
        )


class LineItemDTO(BaseModel):
    """Cart line; price and name are copied, not looked up."""

    model_config = _CONFIG

    product_id: str = Field(alias="productId")
    name: str
    price: float
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v

    def snapshot(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class CreateOrderDTO(BaseModel):
    """Immutable DTO for checkout requests."""

    model_config = _CONFIG

    amount: Decimal
    currency: Optional[str] = None
    customer_info: CustomerInfoDTO = Field(alias="customerInfo")
    items: List[LineItemDTO] = Field(default_factory=list)

    @field_validator("amount")
    @classmethod
    def amount_must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Amount must be greater than zero.")
        return v


# ---------------------------------------------------------------------------
# Payment verification
# ---------------------------------------------------------------------------


class VerifyPaymentDTO(BaseModel):
    """Values handed to the storefront by the gateway's checkout widget."""

    model_config = _CONFIG

    razorpay_order_id: str
    razorpay_payment_id: str
    razorpay_signature: str
    order_id: Optional[str] = Field(default=None, alias="orderId")


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------


class ListOrdersDTO(BaseModel):
    model_config = _CONFIG

    status: Optional[str] = None
    limit: int = DEFAULT_LIST_LIMIT

    @field_validator("limit")
    @classmethod
    def limit_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Limit must be at least 1.")
        return v
