"""Tests for catalog models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront.catalog.models import Product, effective_price


class TestEffectivePrice:
    """Tests for effective price computation."""

    def test_discount_applied(self, make_product) -> None:
        """25% off 100,000 is 75,000."""
        product = make_product(1, price_krw=100000, discount_percent=25)
        assert effective_price(product) == Decimal("75000")

    def test_no_discount(self, make_product) -> None:
        """Without discount the base price is the effective price."""
        product = make_product(1, price_krw=12345, discount_percent=0)
        assert effective_price(product) == 12345

    def test_fractional_result_is_exact(self, make_product) -> None:
        """Odd prices keep their fractional won exactly."""
        product = make_product(1, price_krw=999, discount_percent=33)
        assert effective_price(product) == Decimal("669.33")

    def test_property_matches_function(self, make_product) -> None:
        """The property is the same computation."""
        product = make_product(1, price_krw=80000, discount_percent=15)
        assert product.effective_price == effective_price(product)

    def test_not_stored_on_record(self, make_product) -> None:
        """Effective price is not part of the serialized record."""
        product = make_product(1, price_krw=80000, discount_percent=15)
        assert "effective_price" not in product.model_dump()


class TestProduct:
    """Tests for Product model."""

    def test_parses_camel_case_dataset_keys(self) -> None:
        """Dataset records use camelCase keys."""
        product = Product.model_validate(
            {
                "id": 42,
                "slug": "wireless-mouse",
                "title": "Wireless Mouse",
                "description": "",
                "priceKRW": 30000,
                "discountPercent": 10,
                "category": "Electronics",
                "brand": "ProSound",
                "rating": 4.2,
                "ratingCount": 17,
                "stock": 3,
                "images": [{"url": "https://picsum.photos/seed/42/320/320", "w": 320, "h": 320}],
                "createdAt": "2024-05-01T12:00:00.000Z",
            }
        )
        assert product.price_krw == 30000
        assert product.discount_percent == 10
        assert product.rating_count == 17
        assert product.created_at.year == 2024
        assert product.images[0].w == 320

    def test_is_immutable(self, make_product) -> None:
        """Products cannot be modified."""
        product = make_product(1)
        with pytest.raises(ValidationError):
            product.stock = 0

    def test_rejects_unknown_category(self, make_product) -> None:
        """Category must come from the fixed list."""
        with pytest.raises(ValidationError):
            make_product(1, category="Spaceships")

    @pytest.mark.parametrize("discount", [-1, 100])
    def test_rejects_discount_out_of_range(self, make_product, discount: int) -> None:
        """Discount must be in [0, 100)."""
        with pytest.raises(ValidationError):
            make_product(1, discount_percent=discount)

    def test_naive_timestamp_treated_as_utc(self, make_product) -> None:
        """Naive timestamps become UTC so they compare with aware ones."""
        from datetime import datetime

        product = make_product(1, created_at=datetime(2024, 3, 1))
        assert product.created_at.tzinfo is not None

    def test_combined_slug(self, make_product) -> None:
        product = make_product(42, slug="wireless-mouse")
        assert product.combined_slug == "42-wireless-mouse"

    def test_stock_flags(self, make_product) -> None:
        """Display flags follow stock and discount."""
        assert make_product(1, stock=0).is_out_of_stock
        assert make_product(1, stock=10).is_low_stock
        assert not make_product(1, stock=11).is_low_stock
        assert not make_product(1, stock=0).is_low_stock
        assert make_product(1, discount_percent=5).is_on_sale
        assert not make_product(1, discount_percent=0).is_on_sale
