"""
Unit tests for Product computed properties and site metadata
"""
from decimal import Decimal

from storefront.domain.product import Product
from storefront.domain.site import NAVIGATION, SiteMeta, navigation_dict


def make_product(**overrides):
    data = {
        "id": "prod-1",
        "name": "Running Shoes",
        "slug": "running-shoes",
        "price": "75.00",
        "stock": 3,
    }
    data.update(overrides)
    return Product(**data)


class TestProductDomainModel:

    def test_discount_percent(self):
        product = make_product(price="75.00", compare_at_price="100.00")
        assert product.discount_percent == 25

    def test_discount_rounds_half_up(self):
        # 0.5% off must show as 1%, not banker's-rounded to 0
        product = make_product(price="99.50", compare_at_price="100.00")
        assert product.discount_percent == 1

    def test_discount_rounds_down_below_half(self):
        product = make_product(price="66.67", compare_at_price="100.00")
        assert product.discount_percent == 33

    def test_no_compare_at_price_means_no_discount(self):
        assert make_product().discount_percent == 0

    def test_compare_at_price_below_price_means_no_discount(self):
        product = make_product(price="80.00", compare_at_price="60.00")
        assert product.discount_percent == 0

    def test_stock_flags(self):
        assert make_product(stock=1).in_stock is True
        assert make_product(stock=0).in_stock is False

    def test_gallery_starts_with_main_image_without_duplicates(self):
        product = make_product(
            image_url="a.jpg",
            images=["a.jpg", "b.jpg", "b.jpg", "c.jpg"],
        )
        assert product.gallery == ["a.jpg", "b.jpg", "c.jpg"]

    def test_null_images_column(self):
        product = make_product(image_url="a.jpg", images=None)
        assert product.gallery == ["a.jpg"]

    def test_float_price_from_supabase_is_exact(self):
        product = make_product(price=19.99)
        assert product.price == Decimal("19.99")

    def test_to_dict(self):
        data = make_product(compare_at_price="100.00", image_url="a.jpg").to_dict()

        assert data['price'] == 75.0
        assert data['compare_at_price'] == 100.0
        assert data['discount_percent'] == 25
        assert data['in_stock'] is True
        assert data['gallery'] == ["a.jpg"]

    def test_unknown_columns_are_ignored(self):
        product = make_product(sku="IGNORED", updated_at="2025-01-01")
        assert not hasattr(product, "sku")


class TestSiteMeta:

    def test_meta_from_settings(self):
        meta = SiteMeta.from_settings()
        assert meta.title == "Uday - Your Trusted Online Marketplace"
        assert meta.author == "Uday"

    def test_navigation_links(self):
        links = navigation_dict()

        assert links[0] == {'label': "All Products", 'href': "/products"}
        assert {'label': "Home & Garden", 'href': "/products?category=home-garden"} in links
        assert len(links) == len(NAVIGATION) == 6
