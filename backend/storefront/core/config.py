"""
Centralized application configuration
"""
from decimal import Decimal
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Storefront settings, loaded from the environment or .env"""

    # API Settings
    API_TITLE: str = "Uday Storefront API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Product browsing, cart, checkout and orders on top of Supabase"
    API_DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Supabase
    SUPABASE_URL: str
    SUPABASE_ANON_KEY: str
    SUPABASE_SERVICE_ROLE_KEY: str
    SUPABASE_JWT_SECRET: str
    SUPABASE_JWT_AUDIENCE: str = "authenticated"

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:5173,https://yourdomain.com" or '["http://localhost:5173"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:5173,http://localhost:8080"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:5173"]

        # Try JSON parse first (for array format)
        import json
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    # Shipping rules
    FREE_SHIPPING_THRESHOLD: Decimal = Decimal("50")
    SHIPPING_FLAT_RATE: Decimal = Decimal("9.99")
    DEFAULT_COUNTRY: str = "United States"

    # Home page
    HOME_FEATURED_LIMIT: int = 8
    HOME_CATEGORIES_LIMIT: int = 6

    # Rate limits (requests per minute)
    AUTH_RATE_LIMIT: int = 10
    CHECKOUT_RATE_LIMIT: int = 5
    # Honour X-Forwarded-For only when running behind a trusted proxy
    TRUST_PROXY_HEADERS: bool = False

    # SEO metadata
    SITE_TITLE: str = "Uday - Your Trusted Online Marketplace"
    SITE_DESCRIPTION: str = (
        "Discover amazing products at unbeatable prices. Shop electronics, fashion, "
        "home & garden, sports, and books at Uday - your one-stop e-commerce destination."
    )
    SITE_KEYWORDS: str = (
        "online shopping, e-commerce, electronics, fashion, home goods, sports equipment, "
        "books, buy online, best deals"
    )
    SITE_AUTHOR: str = "Uday"
    SITE_OG_IMAGE: str = "https://images.unsplash.com/photo-1472851294608-062f824d29cc"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
