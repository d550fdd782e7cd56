"""Relational persistence: models, mappers, repositories, unit of work and engine lifecycle."""

from .config import DatabaseSettings, create_engine, create_session_factory, get_database_settings
from .lifecycle import close_database, get_session_factory, init_database
from .models import Base, CustomerModel, OrderItemModel, OrderModel, ProductModel
from .repositories import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
)
from .unit_of_work import UnitOfWork, create_uow

__all__ = [
    "Base",
    "close_database",
    "create_engine",
    "create_session_factory",
    "create_uow",
    "CustomerModel",
    "DatabaseSettings",
    "get_database_settings",
    "get_session_factory",
    "init_database",
    "OrderItemModel",
    "OrderModel",
    "ProductModel",
    "SQLAlchemyCustomerRepository",
    "SQLAlchemyOrderRepository",
    "SQLAlchemyProductRepository",
    "UnitOfWork",
]
