"""Repository interface for Product entities."""

from ..entities.product import Product
from .base import Repository


class ProductRepository(Repository[Product]):
    """Abstract repository for Product persistence."""
