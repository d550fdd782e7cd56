"""Application DTOs."""

from .order_dto import OrderItemProjection, OrderProjection

__all__ = ["OrderItemProjection", "OrderProjection"]
