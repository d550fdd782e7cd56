"""Repository interface for Customer entities."""

from ..entities.customer import Customer
from .base import Repository


class CustomerRepository(Repository[Customer]):
    """Abstract repository for Customer persistence."""
