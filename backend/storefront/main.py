"""
Uday Storefront - Backend API
Product browsing, cart, checkout and orders on top of Supabase
"""
import logging
import time
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.core.config import settings
from storefront.core.database import check_connection, get_supabase

# Import API routers
from storefront.api import auth, cart, catalog, checkout, orders, products, profile

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI application
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    debug=settings.API_DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(catalog.router, prefix="/api/v1", tags=["Catalog"])
app.include_router(products.router, prefix="/api/v1/products", tags=["Products"])
app.include_router(cart.router, prefix="/api/v1/cart", tags=["Cart"])
app.include_router(checkout.router, prefix="/api/v1/checkout", tags=["Checkout"])
app.include_router(orders.router, prefix="/api/v1/orders", tags=["Orders"])
app.include_router(profile.router, prefix="/api/v1/profile", tags=["Profile"])
app.include_router(auth.router)


@app.get("/")
async def root():
    """Root endpoint - API status"""
    return {
        "message": settings.API_TITLE,
        "status": "online",
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION
    }


@app.get("/health")
async def health():
    """Health check endpoint - tests Supabase connectivity"""
    start_time = time.time()

    db_status = "unknown"
    db_error = None

    try:
        check_connection(get_supabase())
        db_status = "connected"
    except Exception as e:
        logger.warning(f"Health check could not reach Supabase: {e}")
        db_status = "disconnected"
        db_error = str(e)

    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": "storefront-api",
        "version": settings.API_VERSION,
        "supabase": {
            "status": db_status,
            "error": db_error,
        },
        "total_latency_ms": total_latency_ms
    }
