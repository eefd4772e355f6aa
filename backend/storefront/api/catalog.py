"""
Catalog API Endpoints
Home page, categories and site metadata
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from supabase import Client

from storefront.core.database import get_supabase
from storefront.domain.site import SiteMeta, navigation_dict
from storefront.repositories.product_repository import CategoryRepository
from storefront.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/home")
async def get_home(sb: Client = Depends(get_supabase)):
    """Featured products and a handful of categories for the landing page"""
    try:
        home = CatalogService(sb).home()

        return {
            "status": "success",
            "data": {
                "featured_products": [p.to_dict() for p in home['featured_products']],
                "categories": [c.to_dict() for c in home['categories']],
            }
        }

    except Exception as e:
        logger.error(f"Error loading data: {e}")
        raise HTTPException(status_code=500, detail="Failed to load home page")


@router.get("/categories")
async def get_categories(sb: Client = Depends(get_supabase)):
    try:
        categories = CategoryRepository(sb).find_all()

        return {
            "status": "success",
            "count": len(categories),
            "data": [c.to_dict() for c in categories]
        }

    except Exception as e:
        logger.error(f"Error loading categories: {e}")
        raise HTTPException(status_code=500, detail="Failed to load categories")


@router.get("/meta")
async def get_site_meta():
    """SEO metadata and the category navigation bar"""
    return {
        "status": "success",
        "data": {
            **SiteMeta.from_settings().model_dump(),
            "navigation": navigation_dict(),
        }
    }
