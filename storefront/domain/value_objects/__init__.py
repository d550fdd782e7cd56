"""Domain value objects."""

from .address import Address
from .money import CENT, to_amount

__all__ = ["Address", "CENT", "to_amount"]
