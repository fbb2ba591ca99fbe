"""Tests for the Product input schema."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.schemas.products import ProductCreate


def test_description_defaults_to_empty_string():
    product = ProductCreate(name="Laptop", price=75000, qty=5)

    assert product.description == ""
    assert product.price == Decimal("75000")


def test_none_description_becomes_empty_string():
    assert ProductCreate(name="Laptop", price=1, qty=1, description=None).description == ""


def test_name_is_trimmed():
    assert ProductCreate(name="  Laptop ", price=1, qty=1).name == "Laptop"


def test_zero_price_and_qty_are_valid():
    product = ProductCreate(name="Free sample", price=0, qty=0)

    assert product.price == 0
    assert product.qty == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"price": -0.01},
        {"qty": -1},
        {"price": "1.999"},
        {"price": 123456789.5},
        {"name": ""},
        {"name": "   "},
    ],
)
def test_invalid_values_are_rejected(overrides):
    data = {"name": "Laptop", "price": 10, "qty": 1, **overrides}

    with pytest.raises(ValidationError):
        ProductCreate(**data)


def test_length_bound_applies_to_trimmed_name():
    assert ProductCreate(name=" " + "x" * 100, price=1, qty=1).name == "x" * 100


def test_qty_must_fit_int_column():
    with pytest.raises(ValidationError):
        ProductCreate(name="Laptop", price=1, qty=2**31)
