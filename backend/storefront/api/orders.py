"""
Orders API Endpoints
Order history of the signed-in shopper

Author: Uday
Date: 2025-10-30
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from supabase import Client

from storefront.core.auth import TokenUser, get_current_user
from storefront.core.database import get_supabase
from storefront.domain.errors import OrderNotFoundError
from storefront.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def get_orders(
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
):
    """
    Orders with their items, newest first
    """
    try:
        orders = OrderService(sb).list_orders(user.id)

        return {
            "status": "success",
            "count": len(orders),
            "data": [order.to_dict() for order in orders]
        }

    except Exception as e:
        logger.error(f"Error loading orders: {e}")
        raise HTTPException(status_code=500, detail="Failed to load orders")


@router.get("/{order_id}")
async def get_order(
    order_id: str,
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
):
    try:
        order = OrderService(sb).get_order(user.id, order_id)

        return {
            "status": "success",
            "data": order.to_dict()
        }

    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        logger.error(f"Error loading order {order_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to load order")
