"""Unit tests for Product."""

from decimal import Decimal

import pytest

from storefront.domain.entities import Product
from storefront.domain.events import ProductCreatedEvent


def test_product_validation():
    with pytest.raises(ValueError, match="Id is required"):
        Product("", "Product 1", 100)
    with pytest.raises(ValueError, match="Name is required"):
        Product("1", "", 100)
    with pytest.raises(ValueError, match="Price must be greater than or equal to zero"):
        Product("1", "Product 1", -1)


def test_change_name_and_price():
    product = Product("1", "Product 1", 100)

    product.change_name("Product 2")
    product.change_price(150)

    assert product.name == "Product 2"
    assert product.price == Decimal("150")


def test_product_records_created_event():
    product = Product("1", "Product 1", "10.50")

    [event] = product.get_domain_events()
    assert isinstance(event, ProductCreatedEvent)
    assert event.event_type == "ProductCreatedEvent"
    assert event.to_dict()["data"]["price"] == "10.50"


def test_price_is_rounded_to_cents():
    product = Product("1", "Product 1", "19.999")
    assert product.price == Decimal("20.00")

    product.change_price(Decimal("19.99") * Decimal("1.07"))
    assert product.price == Decimal("21.39")
