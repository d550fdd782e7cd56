"""Static mappers for domain entities ↔ database models."""

from typing import Any, Dict

from storefront.domain.entities import Customer, Order, OrderItem, Product
from storefront.domain.value_objects import Address

from .models import CustomerModel, OrderItemModel, OrderModel, ProductModel


class CustomerMapper:
    """Static mapper for Customer ↔ CustomerModel transformation."""

    @staticmethod
    def to_domain(model: CustomerModel) -> Customer:
        """Convert ORM model to domain entity.

        Reconstituted customers carry no pending domain events.

        Args:
            model: CustomerModel instance

        Returns:
            Customer domain entity
        """
        address = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number,
                zip=model.zipcode,
                city=model.city,
            )

        customer = Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=bool(model.active),
            reward_points=model.reward_points or 0,
        )
        customer.clear_domain_events()
        return customer

    @staticmethod
    def to_persistence(entity: Customer) -> CustomerModel:
        model = CustomerModel(id=entity.id)
        return CustomerMapper.update_persistence(entity, model)

    @staticmethod
    def update_persistence(entity: Customer, model: CustomerModel) -> CustomerModel:
        """Copy every mutable field of the entity onto an existing model."""
        address = entity.address
        model.name = entity.name
        model.street = address.street if address else None
        model.number = address.number if address else None
        model.zipcode = address.zip if address else None
        model.city = address.city if address else None
        model.active = entity.is_active()
        model.reward_points = entity.reward_points
        return model


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        product = Product(id=model.id, name=model.name, price=model.price)
        product.clear_domain_events()
        return product

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(id=entity.id, name=entity.name, price=entity.price)

    @staticmethod
    def update_persistence(entity: Product, model: ProductModel) -> ProductModel:
        model.name = entity.name
        model.price = entity.price
        return model


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        return OrderItem(
            id=model.id,
            name=model.name,
            price=model.price,
            product_id=model.product_id,
            quantity=model.quantity,
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity
            order_id: Owning order ID

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            id=entity.id,
            name=entity.name,
            price=entity.price,
            quantity=entity.quantity,
            order_id=order_id,
            product_id=entity.product_id,
        )

    @staticmethod
    def to_projection(model: OrderItemModel) -> Dict[str, Any]:
        return {
            "id": model.id,
            "name": model.name,
            "price": model.price,
            "quantity": model.quantity,
            "order_id": model.order_id,
            "product_id": model.product_id,
        }


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        The items collection must already be loaded.

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        return Order(
            id=model.id,
            customer_id=model.customer_id,
            items=[OrderItemMapper.to_domain(item) for item in model.items],
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            total=entity.total(),
        )
        order_model.items = [
            OrderItemMapper.to_persistence(item, entity.id)
            for item in entity.items
        ]
        return order_model

    @staticmethod
    def to_projection(model: OrderModel) -> Dict[str, Any]:
        """Flatten an order row and its items into plain dictionaries.

        Returns:
            {id, customer_id, total, items: [{id, name, price, quantity,
            order_id, product_id}]}
        """
        return {
            "id": model.id,
            "customer_id": model.customer_id,
            "total": model.total,
            "items": [OrderItemMapper.to_projection(item) for item in model.items],
        }
