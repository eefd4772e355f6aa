"""
Domain errors raised by services and mapped to HTTP responses by the routers
"""


class StorefrontError(Exception):
    """Base class for storefront business errors"""

    message = "Something went wrong"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ProductNotFoundError(StorefrontError):
    message = "Product not found"


class CartItemNotFoundError(StorefrontError):
    message = "Cart item not found"


class InvalidQuantityError(StorefrontError):
    message = "Invalid quantity"


class EmptyCartError(StorefrontError):
    message = "Your cart is empty"


class OrderNotFoundError(StorefrontError):
    message = "Order not found"
