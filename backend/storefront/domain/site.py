"""
Site-wide metadata: SEO tags and the category navigation bar
"""
from pydantic import BaseModel
from typing import List, Optional

from storefront.core.config import settings


class NavLink(BaseModel):
    label: str
    category: Optional[str] = None

    @property
    def href(self) -> str:
        if self.category:
            return f"/products?category={self.category}"
        return "/products"


NAVIGATION: List[NavLink] = [
    NavLink(label="All Products"),
    NavLink(label="Electronics", category="electronics"),
    NavLink(label="Fashion", category="fashion"),
    NavLink(label="Home & Garden", category="home-garden"),
    NavLink(label="Sports", category="sports"),
    NavLink(label="Books", category="books"),
]


class SiteMeta(BaseModel):
    title: str
    description: str
    keywords: str
    author: str
    og_image: str

    @classmethod
    def from_settings(cls) -> "SiteMeta":
        return cls(
            title=settings.SITE_TITLE,
            description=settings.SITE_DESCRIPTION,
            keywords=settings.SITE_KEYWORDS,
            author=settings.SITE_AUTHOR,
            og_image=settings.SITE_OG_IMAGE,
        )


def navigation_dict() -> List[dict]:
    return [{'label': link.label, 'href': link.href} for link in NAVIGATION]
