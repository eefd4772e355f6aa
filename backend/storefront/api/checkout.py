"""
Checkout API Endpoints
Checkout page data and order placement

Author: Uday
Date: 2025-10-30
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from supabase import Client

from storefront.core.auth import TokenUser, get_current_user
from storefront.core.config import settings
from storefront.core.database import get_supabase
from storefront.core.rate_limit import rate_limit
from storefront.domain.errors import EmptyCartError
from storefront.domain.order import ShippingAddress
from storefront.services.checkout_service import CheckoutService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def get_checkout(
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
):
    """
    Cart lines, summary and the shipping form prefilled from the profile

    Returns 409 when the cart is empty; the UI sends the shopper back to /cart.
    """
    try:
        checkout = CheckoutService(sb).prepare(user.id)

        return {
            "status": "success",
            "data": {
                "items": [item.to_dict() for item in checkout['items']],
                "summary": checkout['summary'].to_dict(),
                "address": checkout['address'],
            }
        }

    except EmptyCartError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except Exception as e:
        logger.error(f"Error loading cart: {e}")
        raise HTTPException(status_code=500, detail="Failed to load cart")


@router.post("/", status_code=status.HTTP_201_CREATED)
async def place_order(
    address: ShippingAddress,
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
    _: None = Depends(rate_limit(settings.CHECKOUT_RATE_LIMIT, per_user=True)),
):
    """
    Place an order for the current cart

    Writes the order, its items, clears the cart and remembers the address.
    """
    try:
        order = CheckoutService(sb).place_order(user.id, address)

        return {
            "status": "success",
            "message": "Order placed successfully!",
            "data": order.to_dict()
        }

    except EmptyCartError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except Exception as e:
        logger.error(f"Error placing order: {e}")
        raise HTTPException(status_code=500, detail="Failed to place order")
