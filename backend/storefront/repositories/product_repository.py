"""
Product Repository - Data Access Layer for Products and Categories

Handles all Supabase queries for the catalog and returns domain models.

Author: Uday
Date: 2025-10-28
"""
from typing import List, Optional
from supabase import Client

from storefront.domain.product import Product, Category
from storefront.core.database import get_supabase


# sort key -> (column, descending)
SORT_OPTIONS = {
    "featured": ("featured", True),
    "price-asc": ("price", False),
    "price-desc": ("price", True),
    "name": ("name", False),
}

DEFAULT_SORT = "featured"


class ProductRepository:
    """
    Repository for Product data access

    All queries against the products table are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def find_all(
        self,
        search: Optional[str] = None,
        category_id: Optional[str] = None,
        featured: bool = False,
        sort: str = DEFAULT_SORT,
    ) -> List[Product]:
        """
        Find products with filters

        Args:
            search: Case-insensitive substring of the product name
            category_id: Restrict to one category
            featured: Only featured products
            sort: featured | price-asc | price-desc | name

        Returns:
            List of products
        """
        query = self.client.table("products").select("*")

        if search:
            query = query.ilike("name", f"%{search}%")

        if category_id:
            query = query.eq("category_id", category_id)

        if featured:
            query = query.eq("featured", True)

        column, descending = SORT_OPTIONS.get(sort, SORT_OPTIONS[DEFAULT_SORT])
        query = query.order(column, desc=descending)

        response = query.execute()
        return [Product(**row) for row in response.data or []]

    def find_featured(self, limit: int = 8) -> List[Product]:
        """Featured products for the home page"""
        response = (
            self.client.table("products")
            .select("*")
            .eq("featured", True)
            .limit(limit)
            .execute()
        )
        return [Product(**row) for row in response.data or []]

    def find_by_slug(self, slug: str) -> Optional[Product]:
        """
        Find product by slug

        Returns:
            Product or None if not found
        """
        response = (
            self.client.table("products")
            .select("*")
            .eq("slug", slug)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return Product(**response.data[0])

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by ID"""
        response = (
            self.client.table("products")
            .select("*")
            .eq("id", product_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return Product(**response.data[0])


class CategoryRepository:
    """Repository for Category data access"""

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def find_all(self, limit: Optional[int] = None) -> List[Category]:
        query = self.client.table("categories").select("*")
        if limit:
            query = query.limit(limit)
        response = query.execute()
        return [Category(**row) for row in response.data or []]

    def find_by_slug(self, slug: str) -> Optional[Category]:
        response = (
            self.client.table("categories")
            .select("*")
            .eq("slug", slug)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return Category(**response.data[0])
