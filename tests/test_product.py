import dataclasses

import pytest
from solidstore.domain import Product


def test_product_exposes_name_and_price():
    p = Product("Laptop", 1000)
    assert p.name == "Laptop"
    assert p.price == 1000


def test_product_is_immutable():
    p = Product("Phone", 500)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.price = 1  # type: ignore[misc]


def test_products_compare_by_value():
    assert Product("Phone", 500) == Product("Phone", 500)
    assert Product("Phone", 500) != Product("Phone", 499)


def test_zero_price_allowed():
    assert Product("Sticker", 0).price == 0


@pytest.mark.parametrize("name, price", [("Laptop", -1), ("", 10)])
def test_invalid_product_rejected(name, price):
    with pytest.raises(ValueError):
        Product(name, price)
