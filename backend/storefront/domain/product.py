"""
Product Domain Models

Represents catalog entities (products and categories) of the storefront.
This is the single source of truth for product data structure.

Author: Uday
Date: 2025-10-28
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP


class Category(BaseModel):
    """Product category (Electronics, Fashion, Home & Garden, ...)"""

    id: str = Field(..., description="Category ID")
    name: str = Field(..., description="Display name")
    slug: str = Field(..., description="URL slug")
    image_url: Optional[str] = Field(None, description="Category image")
    description: Optional[str] = Field(None, description="Category description")

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    def to_dict(self) -> dict:
        return self.model_dump()


class Product(BaseModel):
    """
    Product domain model - represents a product in the catalog

    Fields:
        id: Product ID (uuid)
        name: Product name
        slug: URL slug, unique
        description: Long description (optional)
        price: Selling price
        compare_at_price: Previous/list price, shown struck through (optional)
        image_url: Main image
        images: Additional gallery images
        stock: Units available
        featured: Whether the product is promoted on the home page
        category_id: Owning category (optional)
    """

    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    slug: str = Field(..., description="URL slug")
    description: Optional[str] = Field(None, description="Product description")

    price: Decimal = Field(..., description="Selling price", ge=0)
    compare_at_price: Optional[Decimal] = Field(None, description="List price before discount", ge=0)

    image_url: Optional[str] = Field(None, description="Main image URL")
    images: List[str] = Field(default_factory=list, description="Gallery image URLs")

    stock: int = Field(0, description="Units in stock")
    featured: bool = Field(False, description="Featured on home page")
    category_id: Optional[str] = Field(None, description="Category ID")

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    @field_validator("images", mode="before")
    @classmethod
    def null_images(cls, value):
        # images is a nullable array column
        return value or []

    # Computed properties
    @property
    def discount_percent(self) -> int:
        """Percent off compare_at_price, rounded half up; 0 when there is no markdown"""
        if not self.compare_at_price or self.compare_at_price <= self.price:
            return 0
        ratio = (self.compare_at_price - self.price) / self.compare_at_price * 100
        return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    @property
    def gallery(self) -> List[str]:
        """Main image first, then the extra images, without duplicates"""
        gallery = []
        for url in [self.image_url, *self.images]:
            if url and url not in gallery:
                gallery.append(url)
        return gallery

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Returns dict with all fields plus computed properties
        """
        data = self.model_dump()

        data['discount_percent'] = self.discount_percent
        data['in_stock'] = self.in_stock
        data['gallery'] = self.gallery

        # Convert Decimal to float for JSON compatibility
        data['price'] = float(data['price'])
        if data.get('compare_at_price') is not None:
            data['compare_at_price'] = float(data['compare_at_price'])

        return data
