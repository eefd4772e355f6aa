"""
Cart API Endpoints
Cart contents, add-to-cart, quantity updates, removal and the cart badge

Author: Uday
Date: 2025-10-30
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, WebSocket, WebSocketDisconnect, status
from typing import Optional
from pydantic import BaseModel, Field
from fastapi.websockets import WebSocketState
from supabase import Client

from storefront.core.auth import TokenUser, get_current_user, get_current_user_optional, user_from_token
from storefront.core.database import get_async_supabase, get_supabase
from storefront.domain.errors import CartItemNotFoundError, InvalidQuantityError, ProductNotFoundError
from storefront.services.cart_service import CartService
from storefront.services.cart_watch_service import CartCountWatcher

logger = logging.getLogger(__name__)

router = APIRouter()


# Request models
class AddToCart(BaseModel):
    product_id: str


class QuantityUpdate(BaseModel):
    quantity: int = Field(..., description="New quantity, 1..stock")


def _cart_response(cart: dict, message: Optional[str] = None) -> dict:
    response = {
        "status": "success",
        "count": len(cart['items']),
        "data": {
            "items": [item.to_dict() for item in cart['items']],
            "summary": cart['summary'].to_dict(),
        }
    }
    if message:
        response["message"] = message
    return response


@router.get("/")
async def get_cart(
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
):
    """Cart items with product details and the order summary"""
    try:
        cart = CartService(sb).get_cart(user.id)
        return _cart_response(cart)

    except Exception as e:
        logger.error(f"Error loading cart: {e}")
        raise HTTPException(status_code=500, detail="Failed to load cart")


@router.post("/items", status_code=status.HTTP_201_CREATED)
async def add_to_cart(
    body: AddToCart,
    user: Optional[TokenUser] = Depends(get_current_user_optional),
    sb: Client = Depends(get_supabase),
):
    """
    Add one unit of a product

    Increments the existing row if the product is already in the cart.
    """
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please sign in to add items to cart",
            headers={"WWW-Authenticate": "Bearer"}
        )

    try:
        service = CartService(sb)
        quantity = service.add_to_cart(user.id, body.product_id)

        return {
            "status": "success",
            "message": "Added to cart!",
            "data": {
                "product_id": body.product_id,
                "quantity": quantity,
                "cart_count": service.cart_count(user.id),
            }
        }

    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidQuantityError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"Error adding to cart: {e}")
        raise HTTPException(status_code=500, detail="Failed to add to cart")


@router.patch("/items/{item_id}")
async def update_cart_item(
    item_id: str,
    update: QuantityUpdate,
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
):
    try:
        cart = CartService(sb).update_quantity(user.id, item_id, update.quantity)
        return _cart_response(cart)

    except CartItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidQuantityError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"Error updating quantity: {e}")
        raise HTTPException(status_code=500, detail="Failed to update quantity")


@router.delete("/items/{item_id}")
async def remove_cart_item(
    item_id: str,
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
):
    try:
        cart = CartService(sb).remove_item(user.id, item_id)
        return _cart_response(cart, message="Item removed from cart")

    except Exception as e:
        logger.error(f"Error removing item: {e}")
        raise HTTPException(status_code=500, detail="Failed to remove item")


@router.get("/count")
async def get_cart_count(
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
):
    """Total units in the cart, for the navbar badge"""
    try:
        return {
            "status": "success",
            "data": {"count": CartService(sb).cart_count(user.id)}
        }

    except Exception as e:
        logger.error(f"Error loading cart count: {e}")
        raise HTTPException(status_code=500, detail="Failed to load cart count")


@router.websocket("/count/ws")
async def cart_count_socket(websocket: WebSocket, token: str = Query(...)):
    """
    Realtime cart badge

    Browsers cannot set headers on WebSocket requests, so the access token
    travels as a query parameter. Sends {"count": n} now and on every
    cart_items change of the user.
    """
    try:
        user = user_from_token(token)
    except HTTPException as e:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason=e.detail)
        return

    await websocket.accept()

    async def send_count(count: int) -> None:
        await websocket.send_json({"count": count})

    watcher = None
    try:
        client = await get_async_supabase()
        watcher = CartCountWatcher(client, user.id, send_count)
        await watcher.start()
        while True:
            # client frames (text or binary) are ignored; this only waits for the disconnect
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
        logger.debug("Cart count socket closed for user %s", user.id)
    except WebSocketDisconnect:
        logger.debug("Cart count socket closed for user %s", user.id)
    except Exception as e:
        logger.error(f"Error in cart count socket for user {user.id}: {e}")
        if websocket.client_state == WebSocketState.CONNECTED:
            await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
    finally:
        if watcher is not None:
            await watcher.stop()
