"""Webhook DTOs.

Razorpay posts events shaped like::

    {"event": "payment.captured",
     "payload": {"payment": {"entity": {"id": "pay_...", ...}}}}

Only the fields the workflow reads are declared; everything else is
kept (``extra="allow"``) so the model never drops data it was sent.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class PaymentEntityDTO(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    order_id: Optional[str] = None
    status: Optional[str] = None


class PaymentPayloadDTO(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    entity: PaymentEntityDTO


class WebhookPayloadDTO(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    payment: PaymentPayloadDTO


class WebhookEventDTO(BaseModel):
    """A verified gateway webhook notification."""

    model_config = ConfigDict(frozen=True, extra="allow")

    event: str
    payload: WebhookPayloadDTO

    @property
    def payment(self) -> PaymentEntityDTO:
        return self.payload.payment.entity
