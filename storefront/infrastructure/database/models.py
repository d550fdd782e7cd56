"""
SQLAlchemy ORM Models.

Maps domain entities to database tables. Column names are snake_case and
form part of the read projection contract.
"""
from sqlalchemy import Boolean, Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import declarative_base, relationship


Base = declarative_base()


# =============================================================================
# CUSTOMER MODEL
# =============================================================================

class CustomerModel(Base):
    """Customer database model with the address flattened into columns."""

    __tablename__ = "customers"

    id = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)

    # Address (all null when the customer has no address)
    street = Column(String(255), nullable=True)
    number = Column(Integer, nullable=True)
    zipcode = Column(String(50), nullable=True)
    city = Column(String(255), nullable=True)

    active = Column(Boolean, nullable=False, default=False)
    reward_points = Column(Integer, nullable=False, default=0)

    orders = relationship("OrderModel", back_populates="customer")

    def __repr__(self):
        return f"<CustomerModel(id={self.id}, name={self.name})>"


# =============================================================================
# PRODUCT MODEL
# =============================================================================

class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name={self.name}, price={self.price})>"


# =============================================================================
# ORDER MODEL
# =============================================================================

class OrderModel(Base):
    """
    Order database model.

    Owns its item rows: deleting an order deletes its items.
    """

    __tablename__ = "orders"

    id = Column(String(255), primary_key=True)
    customer_id = Column(String(255), ForeignKey("customers.id"), nullable=False, index=True)
    total = Column(Numeric(10, 2), nullable=False)

    # Relationships
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
    )
    customer = relationship("CustomerModel", back_populates="orders")

    def __repr__(self):
        return f"<OrderModel(id={self.id}, customer_id={self.customer_id}, total={self.total})>"


# =============================================================================
# ORDER ITEM MODEL
# =============================================================================

class OrderItemModel(Base):
    """
    Order item database model.

    Name and price are copies taken when the order was placed.
    """

    __tablename__ = "order_items"

    id = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)

    # Foreign keys
    order_id = Column(
        String(255),
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id = Column(String(255), ForeignKey("products.id"), nullable=False)

    # Relationships
    order = relationship("OrderModel", back_populates="items")
    product = relationship("ProductModel")

    def __repr__(self):
        return f"<OrderItemModel(id={self.id}, product_id={self.product_id}, quantity={self.quantity})>"
