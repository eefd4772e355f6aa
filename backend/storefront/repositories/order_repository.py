"""
Order Repository - Data Access Layer for Orders

Handles all Supabase queries for orders and order items.

Author: Uday
Date: 2025-10-28
"""
from decimal import Decimal
from typing import List, Optional
from supabase import Client

from storefront.domain.cart import CartItem
from storefront.domain.order import Order, OrderStatus, ShippingAddress
from storefront.core.database import get_supabase


ORDER_WITH_ITEMS_COLUMNS = """
    *,
    order_items (
        id,
        product_id,
        product_name,
        product_price,
        quantity
    )
"""


class OrderRepository:
    """
    Repository for Order data access

    Orders are written in two steps (order row, then its items);
    Supabase offers no transaction across the two calls.
    """

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def create(
        self,
        user_id: str,
        total_amount: Decimal,
        address: ShippingAddress,
    ) -> Order:
        """
        Insert a pending order

        Returns:
            The inserted Order (without items)
        """
        row = {
            "user_id": user_id,
            "total_amount": float(total_amount),
            "status": OrderStatus.PENDING.value,
            **address.to_order_columns(),
        }
        response = self.client.table("orders").insert(row).execute()
        if not response.data:
            raise RuntimeError("Order insert returned no row")
        return Order(**response.data[0])

    def add_items(self, order_id: str, items: List[CartItem]) -> None:
        """Snapshot cart lines (name and price at order time) into order_items"""
        rows = [
            {
                "order_id": order_id,
                "product_id": item.product.id,
                "product_name": item.product.name,
                "product_price": float(item.product.price),
                "quantity": item.quantity,
            }
            for item in items
        ]
        self.client.table("order_items").insert(rows).execute()

    def find_by_user(self, user_id: str) -> List[Order]:
        """Orders of a user with their items, newest first"""
        response = (
            self.client.table("orders")
            .select(ORDER_WITH_ITEMS_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [Order(**row) for row in response.data or []]

    def find_by_id(self, user_id: str, order_id: str) -> Optional[Order]:
        response = (
            self.client.table("orders")
            .select(ORDER_WITH_ITEMS_COLUMNS)
            .eq("id", order_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return Order(**response.data[0])
