"""
Products API Endpoints
Product listing (search, category, featured, sort) and product detail

Author: Uday
Date: 2025-10-29
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional
from supabase import Client

from storefront.core.database import get_supabase
from storefront.domain.errors import ProductNotFoundError
from storefront.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def get_products(
    search: Optional[str] = Query(None, description="Search by product name"),
    category: Optional[str] = Query(None, description="Category slug"),
    featured: bool = Query(False, description="Only featured products"),
    sort: str = Query("featured", description="featured, price-asc, price-desc or name"),
    sb: Client = Depends(get_supabase),
):
    """
    Get products with optional filters

    Unknown sort keys fall back to featured-first.
    """
    try:
        listing = CatalogService(sb).list_products(
            search=search,
            category=category,
            featured=featured,
            sort=sort,
        )
        products = listing['products']

        return {
            "status": "success",
            "title": listing['title'],
            "sort": listing['sort'],
            "count": len(products),
            "data": [product.to_dict() for product in products]
        }

    except Exception as e:
        logger.error(f"Error loading products: {e}")
        raise HTTPException(status_code=500, detail="Failed to load products")


@router.get("/{slug}")
async def get_product(slug: str, sb: Client = Depends(get_supabase)):
    """
    Get a single product by slug

    Includes discount percentage and image gallery
    """
    try:
        product = CatalogService(sb).get_product(slug)

        return {
            "status": "success",
            "data": product.to_dict()
        }

    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        logger.error(f"Error loading product {slug}: {e}")
        raise HTTPException(status_code=500, detail="Product not found")
