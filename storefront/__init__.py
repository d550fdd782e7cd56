"""Storefront - order, customer and product persistence."""

__version__ = "0.1.0"
