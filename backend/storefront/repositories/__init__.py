"""
Repository Layer - Data Access

This layer handles all Supabase queries and returns domain models.
Repositories abstract away query-builder details from business logic.

Author: Uday
Date: 2025-10-28
"""
from storefront.repositories.product_repository import ProductRepository, CategoryRepository
from storefront.repositories.cart_repository import CartRepository
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.profile_repository import ProfileRepository

__all__ = [
    'ProductRepository',
    'CategoryRepository',
    'CartRepository',
    'OrderRepository',
    'ProfileRepository',
]
