"""
Checkout Service
Turns a cart into an order

Author: Uday
Date: 2025-10-30
"""
import logging
from typing import Dict, Optional
from supabase import Client

from storefront.domain.cart import CartSummary
from storefront.domain.errors import EmptyCartError
from storefront.domain.order import Order, OrderItem, ShippingAddress
from storefront.domain.profile import empty_address_prefill
from storefront.repositories.cart_repository import CartRepository
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


class CheckoutService:
    """
    Service for checkout

    Handles:
    - Checkout form prefill from the shopper's profile
    - Order placement: order row, order items, cart clear, profile address
    """

    def __init__(self, client: Optional[Client] = None):
        self.cart = CartRepository(client)
        self.orders = OrderRepository(client)
        self.profiles = ProfileRepository(client)

    def prepare(self, user_id: str) -> Dict:
        """
        Everything the checkout page shows

        Raises:
            EmptyCartError: nothing to check out
        """
        items = self.cart.find_by_user(user_id)
        if not items:
            raise EmptyCartError()

        profile = self.profiles.find_by_id(user_id)
        address = profile.address_prefill() if profile else empty_address_prefill()

        return {
            'items': items,
            'summary': CartSummary.from_items(items),
            'address': address,
        }

    def place_order(self, user_id: str, address: ShippingAddress) -> Order:
        """
        Create an order from the current cart

        Three sequential writes (order, order items, cart clear) with no
        transaction; a failure part way leaves the earlier writes in place.
        Saving the address to the profile is best effort.

        Raises:
            EmptyCartError: nothing to order
        """
        items = self.cart.find_by_user(user_id)
        if not items:
            raise EmptyCartError()

        summary = CartSummary.from_items(items)

        order = self.orders.create(user_id, summary.total, address)
        logger.info("Created order %s for user %s (total %s)", order.id, user_id, summary.total)

        self.orders.add_items(order.id, items)
        self.cart.clear(user_id)

        try:
            self.profiles.update_address(user_id, address)
        except Exception as e:
            logger.warning(f"Order {order.id} placed but saving address to profile failed: {e}")

        return order.model_copy(update={
            'order_items': [
                OrderItem(
                    order_id=order.id,
                    product_id=item.product.id,
                    product_name=item.product.name,
                    product_price=item.product.price,
                    quantity=item.quantity,
                )
                for item in items
            ],
        })
