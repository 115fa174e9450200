# tests/test_product_models.py

from __future__ import annotations

import pytest

from shelf.catalog.product_models import Product, products_from_payload
from shelf.errors import ProductDecodeError


def test_from_dict_accepts_minimal_and_full_records() -> None:
    assert Product.from_dict({"id": "1", "name": "Tea", "price": 3}) == Product("1", "Tea", 3.0)

    full = Product.from_dict({"id": "2", "name": "Coffee", "price": 4.5, "description": "Dark roast"})
    assert full.description == "Dark roast"
    assert full.to_dict() == {"id": "2", "name": "Coffee", "price": 4.5, "description": "Dark roast"}


@pytest.mark.parametrize(
    "data",
    [
        ["not", "a", "dict"],
        {"name": "no id", "price": 1},
        {"id": 1, "name": "int id", "price": 1},
        {"id": "1", "price": 1},
        {"id": "1", "name": "x", "price": "1"},
        {"id": "1", "name": "x", "price": True},
        {"id": "1", "name": "x", "price": 1, "description": 5},
    ],
)
def test_from_dict_rejects_bad_shapes(data) -> None:
    with pytest.raises(ProductDecodeError):
        Product.from_dict(data)


def test_products_from_payload() -> None:
    products = products_from_payload([{"id": "1", "name": "Tea", "price": 1}])
    assert [p.id for p in products] == ["1"]

    with pytest.raises(ProductDecodeError):
        products_from_payload({"a": "A"})
