"""
Cart Repository - Data Access Layer for cart_items

Every query is scoped by user_id: the service-role client bypasses
row-level security.

Author: Uday
Date: 2025-10-28
"""
from typing import List, Optional
from supabase import Client

from storefront.domain.cart import CartItem
from storefront.core.database import get_supabase


CART_ITEM_COLUMNS = """
    id,
    quantity,
    product:products(id, name, slug, price, image_url, stock)
"""


class CartRepository:
    """Repository for CartItem data access"""

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def find_by_user(self, user_id: str) -> List[CartItem]:
        """
        Cart rows of a user joined with their product

        Rows whose product no longer exists are skipped.
        """
        response = (
            self.client.table("cart_items")
            .select(CART_ITEM_COLUMNS)
            .eq("user_id", user_id)
            .execute()
        )
        return [CartItem(**row) for row in response.data or [] if row.get("product")]

    def find_by_id(self, user_id: str, item_id: str) -> Optional[CartItem]:
        response = (
            self.client.table("cart_items")
            .select(CART_ITEM_COLUMNS)
            .eq("id", item_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data or not response.data[0].get("product"):
            return None
        return CartItem(**response.data[0])

    def find_item(self, user_id: str, product_id: str) -> Optional[dict]:
        """
        Existing row for (user, product), as {"id", "quantity"}

        Returns:
            dict or None when the product is not in the cart yet
        """
        response = (
            self.client.table("cart_items")
            .select("id, quantity")
            .eq("user_id", user_id)
            .eq("product_id", product_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]

    def insert(self, user_id: str, product_id: str, quantity: int = 1) -> None:
        self.client.table("cart_items").insert({
            "user_id": user_id,
            "product_id": product_id,
            "quantity": quantity,
        }).execute()

    def update_quantity(self, user_id: str, item_id: str, quantity: int) -> None:
        (
            self.client.table("cart_items")
            .update({"quantity": quantity})
            .eq("id", item_id)
            .eq("user_id", user_id)
            .execute()
        )

    def delete(self, user_id: str, item_id: str) -> None:
        (
            self.client.table("cart_items")
            .delete()
            .eq("id", item_id)
            .eq("user_id", user_id)
            .execute()
        )

    def clear(self, user_id: str) -> None:
        """Remove every cart row of the user"""
        self.client.table("cart_items").delete().eq("user_id", user_id).execute()

    def quantities(self, user_id: str) -> List[int]:
        """Quantities only, for the cart badge"""
        response = (
            self.client.table("cart_items")
            .select("quantity")
            .eq("user_id", user_id)
            .execute()
        )
        return [row["quantity"] for row in response.data or []]
