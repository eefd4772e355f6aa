"""
Order Service
Order history of a shopper

Author: Uday
Date: 2025-11-03
"""
from typing import List, Optional
from supabase import Client

from storefront.domain.errors import OrderNotFoundError
from storefront.domain.order import Order
from storefront.repositories.order_repository import OrderRepository


class OrderService:
    """Read side of orders; placement lives in CheckoutService"""

    def __init__(self, client: Optional[Client] = None):
        self.orders = OrderRepository(client)

    def list_orders(self, user_id: str) -> List[Order]:
        return self.orders.find_by_user(user_id)

    def get_order(self, user_id: str, order_id: str) -> Order:
        """
        One order of the user

        Raises:
            OrderNotFoundError: unknown id or owned by someone else
        """
        order = self.orders.find_by_id(user_id, order_id)
        if not order:
            raise OrderNotFoundError()
        return order
