"""Unit tests for the Order aggregate."""

from decimal import Decimal

import pytest

from storefront.domain.entities import Order, OrderItem


class TestOrderTotal:
    """Test total computation."""

    def test_total_of_single_item(self):
        order = Order("o1", "c1", [OrderItem("i1", "Item 1", 10, "p1", 2)])
        assert order.total() == 20

    def test_total_of_many_items(self):
        order = Order(
            "o1",
            "c1",
            [
                OrderItem("i1", "Item 1", 100, "p1", 2),
                OrderItem("i2", "Item 2", 200, "p2", 2),
            ],
        )
        assert order.total() == Decimal("600")

    def test_total_is_stable_without_mutation(self):
        order = Order("o1", "c1", [OrderItem("i1", "Item 1", "9.99", "p1", 3)])
        assert order.total() == order.total() == Decimal("29.97")

    def test_total_follows_change_items(self):
        order = Order("o1", "c1", [OrderItem("i1", "Item 1", 10, "p1", 2)])
        order.change_items([OrderItem("i2", "Item 2", 50, "p2", 3)])
        assert order.total() == 150

    def test_total_follows_add_item(self):
        order = Order("o1", "c1", [OrderItem("i1", "Item 1", 10, "p1", 2)])
        order.add_item(OrderItem("i2", "Item 2", 5, "p2", 1))
        assert order.total() == 25


class TestOrderValidation:

    def test_id_is_required(self):
        with pytest.raises(ValueError, match="Id is required"):
            Order("", "c1", [OrderItem("i1", "Item 1", 10, "p1", 1)])

    def test_customer_id_is_required(self):
        with pytest.raises(ValueError, match="Customer id is required"):
            Order("o1", "", [OrderItem("i1", "Item 1", 10, "p1", 1)])

    def test_items_are_required(self):
        with pytest.raises(ValueError, match="Items are required"):
            Order("o1", "c1", [])

    def test_change_items_to_empty_fails(self):
        order = Order("o1", "c1", [OrderItem("i1", "Item 1", 10, "p1", 1)])
        with pytest.raises(ValueError, match="Items are required"):
            order.change_items([])

    def test_change_customer(self):
        order = Order("o1", "c1", [OrderItem("i1", "Item 1", 10, "p1", 1)])
        order.change_customer("c2")
        assert order.customer_id == "c2"
        with pytest.raises(ValueError, match="Customer id is required"):
            order.change_customer("")

    def test_duplicate_item_id_rejected(self):
        order = Order("o1", "c1", [OrderItem("i1", "Item 1", 10, "p1", 1)])
        with pytest.raises(ValueError, match="already in order"):
            order.add_item(OrderItem("i1", "Item 1", 10, "p1", 1))
        assert len(order.items) == 1

    def test_duplicate_item_id_rejected_on_construction(self):
        with pytest.raises(ValueError, match="already in order: i1"):
            Order(
                "o1",
                "c1",
                [
                    OrderItem("i1", "Item 1", 10, "p1", 1),
                    OrderItem("i1", "Item 1", 20, "p2", 1),
                ],
            )

    def test_duplicate_item_id_rejected_on_change_items(self):
        original = OrderItem("i1", "Item 1", 10, "p1", 1)
        order = Order("o1", "c1", [original])

        with pytest.raises(ValueError, match="already in order: i2"):
            order.change_items([
                OrderItem("i2", "Item 2", 10, "p1", 1),
                OrderItem("i2", "Item 2", 20, "p2", 1),
            ])

        assert order.items == [original]


class TestOrderItem:

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_must_be_positive(self, quantity):
        with pytest.raises(ValueError, match="Quantity must be greater than 0"):
            OrderItem("i1", "Item 1", 10, "p1", quantity)

    def test_price_cannot_be_negative(self):
        with pytest.raises(ValueError, match="Price"):
            OrderItem("i1", "Item 1", -1, "p1", 1)

    def test_price_is_coerced_to_decimal(self):
        item = OrderItem("i1", "Item 1", 10, "p1", 3)
        assert isinstance(item.price, Decimal)
        assert item.total() == Decimal("30")

    @pytest.mark.parametrize(
        "price, expected",
        [("9.999", Decimal("10.00")), ("9.994", Decimal("9.99")), (0.1, Decimal("0.10"))],
    )
    def test_price_is_rounded_to_cents(self, price, expected):
        item = OrderItem("i1", "Item 1", price, "p1", 3)
        assert item.price == expected
        assert item.total() == expected * 3
