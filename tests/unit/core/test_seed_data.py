"""Unit tests for the ``seed_data`` management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.products.models import Product

pytestmark = pytest.mark.unit


def test_seeds_sample_catalog():
    out = StringIO()
    call_command("seed_data", stdout=out)

    assert "products=3" in out.getvalue()
    assert set(Product.objects.values_list("name", flat=True)) == {
        "Charizard VMAX",
        "Pikachu VMAX",
        "Mewtwo & Mew GX",
    }


def test_second_run_is_a_no_op(make_product):
    make_product()
    out = StringIO()
    call_command("seed_data", stdout=out)

    assert "Database already initialized" in out.getvalue()
    assert Product.objects.count() == 1
