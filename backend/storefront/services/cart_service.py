"""
Cart Service
Add-to-cart reconciliation, quantity updates and the cart badge count

Author: Uday
Date: 2025-10-29
"""
import logging
from typing import Dict, Optional
from supabase import Client

from storefront.domain.cart import CartSummary
from storefront.domain.errors import (
    CartItemNotFoundError,
    InvalidQuantityError,
    ProductNotFoundError,
)
from storefront.repositories.cart_repository import CartRepository
from storefront.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CartService:
    """
    Service for a shopper's cart

    Quantities are kept within 1..stock. Two concurrent add-to-cart calls
    for the same product may both read the old quantity; the platform
    offers no atomic increment through the table API.
    """

    def __init__(self, client: Optional[Client] = None):
        self.cart = CartRepository(client)
        self.products = ProductRepository(client)

    def get_cart(self, user_id: str) -> Dict:
        items = self.cart.find_by_user(user_id)
        return {
            'items': items,
            'summary': CartSummary.from_items(items),
        }

    def add_to_cart(self, user_id: str, product_id: str) -> int:
        """
        Find-or-increment: bump an existing row by one, otherwise insert quantity 1

        Returns:
            The product's new quantity in the cart

        Raises:
            ProductNotFoundError: unknown product
            InvalidQuantityError: not enough stock for one more unit
        """
        product = self.products.find_by_id(product_id)
        if not product:
            raise ProductNotFoundError()

        existing = self.cart.find_item(user_id, product_id)
        new_quantity = existing["quantity"] + 1 if existing else 1

        if new_quantity > product.stock:
            raise InvalidQuantityError(f"Only {product.stock} of {product.name} in stock")

        if existing:
            self.cart.update_quantity(user_id, existing["id"], new_quantity)
        else:
            self.cart.insert(user_id, product_id, 1)

        logger.info("User %s now has %s x %s in cart", user_id, new_quantity, product_id)
        return new_quantity

    def update_quantity(self, user_id: str, item_id: str, quantity: int) -> Dict:
        """
        Set the quantity of a cart row

        Raises:
            InvalidQuantityError: quantity below 1 or above stock
            CartItemNotFoundError: row missing or owned by someone else
        """
        if quantity < 1:
            raise InvalidQuantityError("Quantity must be at least 1")

        item = self.cart.find_by_id(user_id, item_id)
        if not item:
            raise CartItemNotFoundError()

        if quantity > item.product.stock:
            raise InvalidQuantityError(f"Only {item.product.stock} of {item.product.name} in stock")

        self.cart.update_quantity(user_id, item_id, quantity)
        return self.get_cart(user_id)

    def remove_item(self, user_id: str, item_id: str) -> Dict:
        self.cart.delete(user_id, item_id)
        return self.get_cart(user_id)

    def cart_count(self, user_id: str) -> int:
        """Total units in the cart (badge number)"""
        return sum(self.cart.quantities(user_id))
