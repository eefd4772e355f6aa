"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: Uday
Date: 2025-10-28
"""
from storefront.domain.product import Product, Category
from storefront.domain.cart import CartItem, CartProduct, CartSummary
from storefront.domain.order import Order, OrderItem, OrderStatus, ShippingAddress
from storefront.domain.profile import Profile

__all__ = [
    'Product',
    'Category',
    'CartItem',
    'CartProduct',
    'CartSummary',
    'Order',
    'OrderItem',
    'OrderStatus',
    'ShippingAddress',
    'Profile',
]
