"""Serializer fields shared by the storefront resources."""

from __future__ import annotations

from rest_framework import serializers


class MoneyField(serializers.DecimalField):
    """Read-only decimal rendered exactly as stored, without quantizing.

    ``COERCE_DECIMAL_TO_STRING`` is off, so the value reaches the client as
    a JSON number: a stored ``12.345000`` is sent as ``12.345``.
    """

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("read_only", True)
        super().__init__(max_digits=None, decimal_places=None, **kwargs)
