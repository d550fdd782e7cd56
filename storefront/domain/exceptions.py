"""Domain exceptions."""


class EntityNotFoundError(Exception):
    """Raised when an aggregate expected to exist is missing from storage."""

    entity_name = "Entity"

    def __init__(self, entity_id: str):
        self.entity_id = entity_id
        super().__init__(f"{self.entity_name} not found: {entity_id}")


class CustomerNotFoundError(EntityNotFoundError):
    entity_name = "Customer"


class ProductNotFoundError(EntityNotFoundError):
    entity_name = "Product"


class OrderNotFoundError(EntityNotFoundError):
    entity_name = "Order"
