"""Unit tests for the Razorpay Orders API client."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
import requests

from modules.payments.exceptions import PaymentGatewayError
from modules.payments.gateway import RazorpayGateway

pytestmark = pytest.mark.unit


def _response(status_code: int, payload=None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    if payload is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    response.text = text
    return response


@pytest.fixture()
def gateway():
    return RazorpayGateway(
        key_id="rzp_key", key_secret="rzp_secret", base_url="https://gw.test/v1/"
    )


class TestRazorpayGatewayDefaults:
    def test_reads_settings(self):
        gateway = RazorpayGateway()
        assert gateway.key_id == "rzp_test_key"
        assert gateway.key_secret == "s3cr3t"
        assert gateway.base_url == "https://api.razorpay.test/v1"
        assert gateway.timeout == 30

    def test_receipt_format(self):
        receipt = RazorpayGateway.build_receipt()
        assert receipt.startswith("receipt_")
        assert receipt[len("receipt_"):].isdigit()


class TestCreateOrder:
    def test_posts_minor_units_with_basic_auth(self, gateway):
        remote = {"id": "order_1", "amount": 29999, "currency": "INR"}
        with patch(
            "modules.payments.gateway.requests.post",
            return_value=_response(200, remote),
        ) as post:
            result = gateway.create_order(
                Decimal("299.99"), "INR", {"store": "Froakie_TCG Store"}
            )

        assert result == remote
        args, kwargs = post.call_args
        assert args[0] == "https://gw.test/v1/orders"
        assert kwargs["auth"] == ("rzp_key", "rzp_secret")
        assert kwargs["timeout"] == 30
        body = kwargs["json"]
        assert body["amount"] == 29999
        assert body["currency"] == "INR"
        assert body["notes"] == {"store": "Froakie_TCG Store"}
        assert body["receipt"].startswith("receipt_")

    def test_accepts_201(self, gateway):
        with patch(
            "modules.payments.gateway.requests.post",
            return_value=_response(201, {"id": "order_2"}),
        ):
            assert gateway.create_order(1, "INR", {})["id"] == "order_2"

    def test_rejection_carries_gateway_description(self, gateway):
        payload = {"error": {"code": "BAD_REQUEST_ERROR", "description": "Authentication failed"}}
        with patch(
            "modules.payments.gateway.requests.post",
            return_value=_response(401, payload),
        ):
            with pytest.raises(PaymentGatewayError, match="Authentication failed"):
                gateway.create_order(1, "INR", {})

    def test_rejection_without_json(self, gateway):
        with patch(
            "modules.payments.gateway.requests.post",
            return_value=_response(502, text="Bad Gateway"),
        ):
            with pytest.raises(PaymentGatewayError, match="Bad Gateway"):
                gateway.create_order(1, "INR", {})

    def test_transport_error_wrapped(self, gateway):
        with patch(
            "modules.payments.gateway.requests.post",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            with pytest.raises(PaymentGatewayError, match="unreachable"):
                gateway.create_order(1, "INR", {})
