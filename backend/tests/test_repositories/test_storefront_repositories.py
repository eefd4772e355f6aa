"""
Unit tests for the repositories

These tests validate query construction against a fake Supabase client,
without network access.

Author: Uday
Date: 2025-10-31
"""
from decimal import Decimal

from storefront.domain.cart import CartItem
from storefront.domain.order import Order, ShippingAddress
from storefront.domain.product import Product
from storefront.repositories import (
    CartRepository,
    CategoryRepository,
    OrderRepository,
    ProductRepository,
    ProfileRepository,
)


class TestProductRepository:

    def test_find_all_applies_filters_and_sort(self, fake_supabase, product_row):
        fake_supabase.respond("products", [product_row])

        products = ProductRepository(fake_supabase).find_all(
            search="head", category_id="cat-electronics", featured=True, sort="price-desc"
        )

        assert len(products) == 1
        assert isinstance(products[0], Product)

        query = fake_supabase.queries_for("products")[0]
        assert query.called("ilike") == [(("name", "%head%"), {})]
        assert (("category_id", "cat-electronics"), {}) in query.called("eq")
        assert (("featured", True), {}) in query.called("eq")
        assert query.called("order") == [(("price",), {"desc": True})]

    def test_find_all_without_filters_sorts_featured_first(self, fake_supabase):
        ProductRepository(fake_supabase).find_all()

        query = fake_supabase.queries_for("products")[0]
        assert query.called("ilike") == []
        assert query.called("eq") == []
        assert query.called("order") == [(("featured",), {"desc": True})]

    def test_unknown_sort_falls_back_to_featured(self, fake_supabase):
        ProductRepository(fake_supabase).find_all(sort="popularity")

        query = fake_supabase.queries_for("products")[0]
        assert query.called("order") == [(("featured",), {"desc": True})]

    def test_find_by_slug(self, fake_supabase, product_row):
        fake_supabase.respond("products", [product_row])

        product = ProductRepository(fake_supabase).find_by_slug("wireless-headphones")

        assert product.id == "prod-1"
        query = fake_supabase.queries_for("products")[0]
        assert query.called("eq") == [(("slug", "wireless-headphones"), {})]

    def test_find_by_slug_returns_none_when_missing(self, fake_supabase):
        assert ProductRepository(fake_supabase).find_by_slug("nope") is None

    def test_find_featured_limit(self, fake_supabase):
        ProductRepository(fake_supabase).find_featured(limit=8)

        query = fake_supabase.queries_for("products")[0]
        assert query.called("limit") == [((8,), {})]


class TestCategoryRepository:

    def test_find_all_with_limit(self, fake_supabase):
        fake_supabase.respond("categories", [
            {"id": "c1", "name": "Books", "slug": "books", "image_url": None},
        ])

        categories = CategoryRepository(fake_supabase).find_all(limit=6)

        assert categories[0].slug == "books"
        assert fake_supabase.queries_for("categories")[0].called("limit") == [((6,), {})]

    def test_find_by_slug_missing(self, fake_supabase):
        assert CategoryRepository(fake_supabase).find_by_slug("toys") is None


class TestCartRepository:

    def test_find_by_user_joins_products(self, fake_supabase, cart_rows):
        fake_supabase.respond("cart_items", cart_rows)

        items = CartRepository(fake_supabase).find_by_user("user-1")

        assert [item.id for item in items] == ["item-1", "item-2"]
        assert all(isinstance(item, CartItem) for item in items)

        query = fake_supabase.queries_for("cart_items")[0]
        (columns,), _ = query.called("select")[0]
        assert "product:products(id, name, slug, price, image_url, stock)" in columns
        assert query.called("eq") == [(("user_id", "user-1"), {})]

    def test_find_by_user_skips_rows_without_product(self, fake_supabase, cart_rows):
        cart_rows[1]["product"] = None
        fake_supabase.respond("cart_items", cart_rows)

        items = CartRepository(fake_supabase).find_by_user("user-1")

        assert [item.id for item in items] == ["item-1"]

    def test_find_item(self, fake_supabase):
        fake_supabase.respond("cart_items", [{"id": "item-1", "quantity": 2}])

        row = CartRepository(fake_supabase).find_item("user-1", "prod-1")

        assert row == {"id": "item-1", "quantity": 2}
        query = fake_supabase.queries_for("cart_items")[0]
        assert query.called("eq") == [
            (("user_id", "user-1"), {}),
            (("product_id", "prod-1"), {}),
        ]

    def test_update_and_delete_are_scoped_to_user(self, fake_supabase):
        repo = CartRepository(fake_supabase)

        repo.update_quantity("user-1", "item-1", 3)
        repo.delete("user-1", "item-2")

        update = fake_supabase.queries_for("cart_items", "update")[0]
        assert update.called("update") == [(({"quantity": 3},), {})]
        assert (("user_id", "user-1"), {}) in update.called("eq")
        assert (("id", "item-1"), {}) in update.called("eq")

        delete = fake_supabase.queries_for("cart_items", "delete")[0]
        assert (("user_id", "user-1"), {}) in delete.called("eq")
        assert (("id", "item-2"), {}) in delete.called("eq")

    def test_clear(self, fake_supabase):
        CartRepository(fake_supabase).clear("user-1")

        delete = fake_supabase.queries_for("cart_items", "delete")[0]
        assert delete.called("eq") == [(("user_id", "user-1"), {})]

    def test_quantities(self, fake_supabase):
        fake_supabase.respond("cart_items", [{"quantity": 2}, {"quantity": 5}])
        assert CartRepository(fake_supabase).quantities("user-1") == [2, 5]


class TestOrderRepository:

    def test_create_inserts_pending_order(self, fake_supabase, order_row, shipping_address):
        fake_supabase.respond("orders", [order_row])

        order = OrderRepository(fake_supabase).create(
            "user-1", Decimal("52.49"), ShippingAddress(**shipping_address)
        )

        assert isinstance(order, Order)
        insert = fake_supabase.queries_for("orders", "insert")[0]
        (row,), _ = insert.called("insert")[0]
        assert row["user_id"] == "user-1"
        assert row["total_amount"] == 52.49
        assert row["status"] == "pending"
        assert row["shipping_city"] == "Springfield"
        assert row["shipping_address_line2"] == "Apt 4"

    def test_add_items_snapshots_name_and_price(self, fake_supabase, cart_rows):
        items = [CartItem(**row) for row in cart_rows]

        OrderRepository(fake_supabase).add_items("order-1", items)

        insert = fake_supabase.queries_for("order_items", "insert")[0]
        (rows,), _ = insert.called("insert")[0]
        assert rows == [
            {"order_id": "order-1", "product_id": "prod-1", "product_name": "Wireless Headphones",
             "product_price": 15.0, "quantity": 2},
            {"order_id": "order-1", "product_id": "prod-2", "product_name": "Paperback Novel",
             "product_price": 12.5, "quantity": 1},
        ]

    def test_find_by_user_newest_first(self, fake_supabase, order_row):
        fake_supabase.respond("orders", [order_row])

        orders = OrderRepository(fake_supabase).find_by_user("user-1")

        assert len(orders[0].order_items) == 2
        query = fake_supabase.queries_for("orders")[0]
        assert query.called("order") == [(("created_at",), {"desc": True})]
        assert query.called("eq") == [(("user_id", "user-1"), {})]


class TestProfileRepository:

    def test_find_by_id(self, fake_supabase):
        fake_supabase.respond("profiles", [{"id": "user-1", "city": "Austin"}])

        profile = ProfileRepository(fake_supabase).find_by_id("user-1")

        assert profile.city == "Austin"

    def test_update_address(self, fake_supabase, shipping_address):
        ProfileRepository(fake_supabase).update_address("user-1", ShippingAddress(**shipping_address))

        update = fake_supabase.queries_for("profiles", "update")[0]
        (columns,), _ = update.called("update")[0]
        assert columns["address_line1"] == "1 Main St"
        assert update.called("eq") == [(("id", "user-1"), {})]
