"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``) and accept the storefront's
camelCase wire names (``marketPrice``) as well as the Python names.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial/full product updates.
- ``StockAdjustmentDTO``: input for ``PATCH /products/{id}/stock``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Every descriptive field is required; ``stock`` defaults to 0.
    """

    model_config = _CONFIG

    name: str
    price: Decimal
    stock: int = 0
    description: str
    image: str
    market_price: Decimal = Field(alias="marketPrice")
    market_url: str = Field(alias="marketUrl")
    market_source: str = Field(alias="marketSource")


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only supplied fields will be updated.
    """

    model_config = _CONFIG

    name: Optional[str] = None
    price: Optional[Decimal] = None
    stock: Optional[int] = None
    description: Optional[str] = None
    image: Optional[str] = None
    market_price: Optional[Decimal] = Field(default=None, alias="marketPrice")
    market_url: Optional[str] = Field(default=None, alias="marketUrl")
    market_source: Optional[str] = Field(default=None, alias="marketSource")

    def changes(self) -> Dict[str, Any]:
        """Fields the caller actually supplied with a non-null value."""
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class StockAdjustmentDTO(BaseModel):
    """Quantity to subtract from a product's stock (negative adds)."""

    model_config = _CONFIG

    quantity: int
