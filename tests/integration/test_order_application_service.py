"""Integration tests for OrderApplicationService."""

import json
from decimal import Decimal

import pytest

from storefront.application.services import OrderApplicationService
from storefront.domain.exceptions import CustomerNotFoundError, ProductNotFoundError
from storefront.infrastructure.database.repositories import SQLAlchemyCustomerRepository


@pytest.mark.asyncio
async def test_place_order(customer, product, customer_repository, session_factory):
    """Test placing an order stores it and awards reward points."""
    service = OrderApplicationService(session_factory=session_factory)

    projection = await service.place_order(customer.id, [(product.id, 2)], order_id="o-1")

    assert projection.id == "o-1"
    assert projection.customer_id == customer.id
    assert projection.total == Decimal("20")
    assert len(projection.items) == 1
    assert projection.items[0].name == product.name
    assert projection.items[0].price == product.price
    assert projection.items[0].order_id == "o-1"

    stored_customer = await customer_repository.find(customer.id)
    assert stored_customer.reward_points == 10


@pytest.mark.asyncio
async def test_place_order_unknown_customer(product, session_factory):
    service = OrderApplicationService(session_factory=session_factory)

    with pytest.raises(CustomerNotFoundError):
        await service.place_order("404", [(product.id, 1)])


@pytest.mark.asyncio
async def test_place_order_unknown_product(customer, session_factory):
    service = OrderApplicationService(session_factory=session_factory)

    with pytest.raises(ProductNotFoundError):
        await service.place_order(customer.id, [("404", 1)])

    assert await service.list_orders() == []


@pytest.mark.asyncio
async def test_list_orders_is_json_serializable(customer, product, session_factory):
    service = OrderApplicationService(session_factory=session_factory)
    await service.place_order(customer.id, [(product.id, 1)], order_id="a")
    await service.place_order(customer.id, [(product.id, 3)], order_id="b")

    orders = await service.list_orders()

    assert [o.id for o in orders] == ["a", "b"]
    payload = json.loads(json.dumps([o.to_json_dict() for o in orders]))
    assert payload[1]["total"] == 30.0
    assert payload[1]["items"][0]["quantity"] == 3
    assert set(payload[0]["items"][0]) == {
        "id", "name", "price", "quantity", "order_id", "product_id"
    }


@pytest.mark.asyncio
async def test_get_missing_order(session_factory):
    service = OrderApplicationService(session_factory=session_factory)

    assert await service.get_order("404") is None


@pytest.mark.asyncio
async def test_place_order_is_atomic(customer, product, customer_repository, session_factory, monkeypatch):
    """Test a failing reward-points write also discards the order."""
    async def failing_update(self, entity):
        raise RuntimeError("customer write failed")

    monkeypatch.setattr(SQLAlchemyCustomerRepository, "update", failing_update)
    service = OrderApplicationService(session_factory=session_factory)

    with pytest.raises(RuntimeError, match="customer write failed"):
        await service.place_order(customer.id, [(product.id, 2)], order_id="x")

    assert await service.list_orders() == []
    assert await service.get_order("x") is None
    stored_customer = await customer_repository.find(customer.id)
    assert stored_customer.reward_points == 0


@pytest.mark.asyncio
async def test_place_order_returns_stored_shape(customer, product, session_factory):
    service = OrderApplicationService(session_factory=session_factory)

    placed = await service.place_order(customer.id, [(product.id, 3)], order_id="o-1")

    assert placed == await service.get_order("o-1")
