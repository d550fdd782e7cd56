"""Product domain service."""
from decimal import Decimal
from typing import List

from ..entities.product import Product


class ProductService:

    @staticmethod
    def increase_price(products: List[Product], percentage) -> List[Product]:
        """Raise every product price by a percentage, in place."""
        factor = 1 + Decimal(str(percentage)) / 100
        for product in products:
            product.change_price(product.price * factor)
        return products
