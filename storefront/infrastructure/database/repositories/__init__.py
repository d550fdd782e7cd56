"""SQLAlchemy repository implementations."""

from .customer_repository import SQLAlchemyCustomerRepository
from .order_repository import SQLAlchemyOrderRepository
from .product_repository import SQLAlchemyProductRepository

__all__ = [
    "SQLAlchemyCustomerRepository",
    "SQLAlchemyOrderRepository",
    "SQLAlchemyProductRepository",
]
