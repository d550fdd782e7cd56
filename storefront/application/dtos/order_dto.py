"""Application DTOs for Order read projections."""

from decimal import Decimal
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from storefront.domain.entities import Order


class OrderItemProjection(BaseModel):
    """Projection of one order_items row."""

    id: str = Field(..., description="Item ID")
    name: str = Field(..., description="Product name at order time")
    price: Decimal = Field(..., ge=0, description="Unit price at order time")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    order_id: str = Field(..., description="Owning order ID")
    product_id: str = Field(..., description="Referenced product ID")

    model_config = {"frozen": True}


class OrderProjection(BaseModel):
    """Projection of one orders row with its items."""

    id: str = Field(..., description="Order ID")
    customer_id: str = Field(..., description="Owning customer ID")
    total: Decimal = Field(..., ge=0, description="Sum of price * quantity")
    items: List[OrderItemProjection] = Field(default_factory=list, description="Order items")

    model_config = {"frozen": True}

    @classmethod
    def from_row(cls, projection: Dict[str, Any]) -> "OrderProjection":
        """Build from the dictionary returned by OrderRepository.find_projection()."""
        return cls.model_validate(projection)

    @classmethod
    def from_order(cls, order: Order) -> "OrderProjection":
        """Build from an Order aggregate, in the same shape as a stored row."""
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            total=order.total(),
            items=[
                OrderItemProjection(
                    id=item.id,
                    name=item.name,
                    price=item.price,
                    quantity=item.quantity,
                    order_id=order.id,
                    product_id=item.product_id,
                )
                for item in order.items
            ],
        )

    def to_json_dict(self) -> Dict[str, Any]:
        """Return the projection with amounts rendered as JSON numbers."""
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "total": float(self.total),
            "items": [
                {**item.model_dump(), "price": float(item.price)}
                for item in self.items
            ],
        }
