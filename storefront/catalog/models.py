"""Pydantic models for the product catalog.

Products are immutable: the catalog is generated once by the seeder and
never changes while the service runs. Field names are snake_case in Python
and camelCase in the JSON dataset.
"""

from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.catalog.taxonomy import CATEGORIES, is_category

# Stock at or below this count (but above zero) is flagged as running low
LOW_STOCK_THRESHOLD = 10


class ProductImage(BaseModel):
    """Image rendition of a product."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Image URL")
    w: int = Field(..., gt=0, description="Width in pixels")
    h: int = Field(..., gt=0, description="Height in pixels")


class Product(BaseModel):
    """Product entity in the catalog.

    Attributes:
        id: Unique, stable product identifier.
        slug: URL-safe name; unique only together with ``id``.
        title: Product title.
        description: Product description.
        brand: Brand name.
        category: One of the fixed taxonomy categories.
        price_krw: Base price in whole won.
        discount_percent: Discount in percent, 0 to 99.
        rating: Average rating (0.0-5.0).
        rating_count: Number of ratings, used as the popularity measure.
        stock: Units available; 0 means out of stock.
        images: Image renditions, smallest first.
        created_at: Creation timestamp.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., gt=0)
    slug: str
    title: str
    description: str = ""
    brand: str
    category: str
    price_krw: int = Field(..., ge=0, alias="priceKRW")
    discount_percent: int = Field(0, ge=0, lt=100, alias="discountPercent")
    rating: float = Field(0.0, ge=0, le=5)
    rating_count: int = Field(0, ge=0, alias="ratingCount")
    stock: int = Field(0, ge=0)
    images: tuple[ProductImage, ...] = ()
    created_at: datetime = Field(..., alias="createdAt")

    @field_validator("category")
    @classmethod
    def _check_category(cls, value: str) -> str:
        if not is_category(value):
            raise ValueError(f"unknown category {value!r}, expected one of {list(CATEGORIES)}")
        return value

    @field_validator("created_at")
    @classmethod
    def _ensure_aware(cls, value: datetime) -> datetime:
        # Naive and aware datetimes cannot be compared when sorting
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, slug={self.slug}, title={self.title[:30]}...)>"

    @property
    def effective_price(self) -> Decimal:
        """Price after discount. Recomputed on every access."""
        return effective_price(self)

    @property
    def combined_slug(self) -> str:
        """Identifier used in product URLs: ``"<id>-<slug>"``."""
        return f"{self.id}-{self.slug}"

    @property
    def is_on_sale(self) -> bool:
        return self.discount_percent > 0

    @property
    def is_out_of_stock(self) -> bool:
        return self.stock <= 0

    @property
    def is_low_stock(self) -> bool:
        return 0 < self.stock <= LOW_STOCK_THRESHOLD


def effective_price(product: Product) -> Decimal:
    """Compute the discounted price of a product.

    ``price_krw * (1 - discount_percent / 100)`` in exact decimal arithmetic.
    This, not ``price_krw``, is the key for every price filter and sort.

    Args:
        product: Product to price.

    Returns:
        Effective price in won.
    """
    return Decimal(product.price_krw) * (100 - product.discount_percent) / 100
