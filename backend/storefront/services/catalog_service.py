"""
Catalog Service
Home page data, product listings and product detail

Author: Uday
Date: 2025-10-29
"""
import logging
from typing import Dict, List, Optional
from supabase import Client

from storefront.core.config import settings
from storefront.domain.errors import ProductNotFoundError
from storefront.domain.product import Product
from storefront.repositories.product_repository import (
    CategoryRepository,
    DEFAULT_SORT,
    ProductRepository,
    SORT_OPTIONS,
)

logger = logging.getLogger(__name__)


def listing_title(
    search: Optional[str] = None,
    category: Optional[str] = None,
    featured: bool = False,
) -> str:
    """
    Heading of a product listing

    Search wins over category, category over featured.
    A category slug is title-cased word by word ("home-garden" -> "Home Garden").
    """
    if search:
        return f'Search results for "{search}"'
    if category:
        return " ".join(word[:1].upper() + word[1:] for word in category.split("-"))
    if featured:
        return "Featured Products"
    return "All Products"


class CatalogService:
    """
    Service for browsing the catalog

    Handles:
    - Home page (featured products + categories)
    - Listings with search / category / featured filters and sorting
    - Product detail by slug
    """

    def __init__(self, client: Optional[Client] = None):
        self.products = ProductRepository(client)
        self.categories = CategoryRepository(client)

    def home(self) -> Dict:
        featured = self.products.find_featured(limit=settings.HOME_FEATURED_LIMIT)
        categories = self.categories.find_all(limit=settings.HOME_CATEGORIES_LIMIT)

        return {
            'featured_products': featured,
            'categories': categories,
        }

    def list_products(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        featured: bool = False,
        sort: str = DEFAULT_SORT,
    ) -> Dict:
        """
        Products matching the filters

        Returns:
            Dict with title, sort, products
        """
        search = search.strip() if search else None
        if sort not in SORT_OPTIONS:
            sort = DEFAULT_SORT

        products: List[Product] = []
        category_id = None
        skip_query = False

        if category:
            found = self.categories.find_by_slug(category)
            if found:
                category_id = found.id
            else:
                logger.info("Unknown category slug %r, returning empty listing", category)
                skip_query = True

        if not skip_query:
            products = self.products.find_all(
                search=search,
                category_id=category_id,
                featured=featured,
                sort=sort,
            )

        return {
            'title': listing_title(search=search, category=category, featured=featured),
            'sort': sort,
            'products': products,
        }

    def get_product(self, slug: str) -> Product:
        product = self.products.find_by_slug(slug)
        if not product:
            raise ProductNotFoundError()
        return product
