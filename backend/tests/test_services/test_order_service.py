"""
Unit tests for OrderService
"""
import pytest
from decimal import Decimal

from storefront.domain.errors import OrderNotFoundError
from storefront.services.order_service import OrderService


class TestOrderService:

    def test_get_order(self, fake_supabase, order_row):
        fake_supabase.respond("orders", [order_row])

        order = OrderService(fake_supabase).get_order("user-1", order_row["id"])

        assert order.id == order_row["id"]
        assert order.total_amount == Decimal("52.49")
        query = fake_supabase.queries_for("orders", "select")[0]
        assert (("user_id", "user-1"), {}) in query.called("eq")

    def test_get_order_raises_when_missing(self, fake_supabase):
        fake_supabase.respond("orders", [])

        with pytest.raises(OrderNotFoundError) as exc_info:
            OrderService(fake_supabase).get_order("user-1", "unknown")

        assert exc_info.value.message == "Order not found"

    def test_other_users_order_is_not_found(self, fake_supabase):
        # the user_id filter drops the row, so the query comes back empty
        fake_supabase.respond("orders", [])

        with pytest.raises(OrderNotFoundError):
            OrderService(fake_supabase).get_order("user-2", "3f2a9c1e")

        query = fake_supabase.queries_for("orders", "select")[0]
        assert (("user_id", "user-2"), {}) in query.called("eq")

    def test_list_orders(self, fake_supabase, order_row):
        fake_supabase.respond("orders", [order_row])

        orders = OrderService(fake_supabase).list_orders("user-1")

        assert [order.id for order in orders] == [order_row["id"]]

    def test_list_orders_empty(self, fake_supabase):
        assert OrderService(fake_supabase).list_orders("user-1") == []
