"""API Request/Response schemas.

Pydantic models for the HTTP listing API. These are the wire contract;
the catalog core works on ``storefront.catalog.models.Product``.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from storefront.catalog.models import Product
from storefront.catalog.pagination import PaginatedResult, page_window
from storefront.catalog.service import PriceRange, SlugPage


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[dict] = Field(default_factory=list, description="Additional error details")
    request_id: str | None = Field(None, description="Request ID for correlation")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductImageSchema(BaseModel):
    """Product image rendition."""

    url: str = Field(..., description="Image URL")
    w: int = Field(..., description="Width in pixels")
    h: int = Field(..., description="Height in pixels")


class ProductSchema(BaseModel):
    """Product details with display flags."""

    id: int = Field(..., description="Product ID")
    slug: str = Field(..., description="Human readable slug")
    combined_slug: str = Field(..., description="URL identifier '<id>-<slug>'")
    title: str = Field(..., description="Product title")
    description: str = Field(..., description="Product description")
    brand: str = Field(..., description="Brand name")
    category: str = Field(..., description="Category name")
    price_krw: int = Field(..., description="Base price in won")
    discount_percent: int = Field(..., description="Discount in percent")
    final_price: float = Field(..., description="Price after discount in won")
    rating: float = Field(..., ge=0, le=5, description="Average rating")
    rating_count: int = Field(..., ge=0, description="Number of ratings")
    stock: int = Field(..., ge=0, description="Units available")
    is_on_sale: bool = Field(..., description="Whether a discount applies")
    is_out_of_stock: bool = Field(..., description="Whether stock is zero")
    is_low_stock: bool = Field(..., description="Whether few units remain")
    images: list[ProductImageSchema] = Field(default_factory=list, description="Images")
    created_at: datetime = Field(..., description="Creation timestamp")


class ProductListResponse(BaseModel):
    """Paginated product list response."""

    items: list[ProductSchema] = Field(..., description="Products on this page")
    total_count: int = Field(..., description="Products matching the filters")
    total_pages: int = Field(..., description="Number of pages")
    current_page: int = Field(..., description="Requested page")
    has_next: bool = Field(..., description="Whether a next page exists")
    has_prev: bool = Field(..., description="Whether a previous page exists")
    page_size: int = Field(..., description="Items per page")
    pages: list[int | None] = Field(
        default_factory=list,
        description="Page numbers to show; null marks an ellipsis",
    )


class RelatedProductsResponse(BaseModel):
    """Related products response."""

    product_id: int = Field(..., description="Product the list relates to")
    items: list[ProductSchema] = Field(..., description="Related products")


class SlugListResponse(BaseModel):
    """Window of product slugs."""

    slugs: list[str] = Field(..., description="Combined product slugs")
    has_more: bool = Field(..., description="Whether more slugs follow")
    total: int = Field(..., description="Total number of products")


# ============================================================================
# Reference Data Schemas
# ============================================================================


class CategoryListResponse(BaseModel):
    """Category list response."""

    categories: list[str] = Field(..., description="All categories")


class BrandListResponse(BaseModel):
    """Brand list response."""

    brands: list[str] = Field(..., description="Brands in the catalog, sorted")


class PriceRangeResponse(BaseModel):
    """Price range response."""

    min: float = Field(..., description="Lowest effective price")
    max: float = Field(..., description="Highest effective price")


# ============================================================================
# Converters
# ============================================================================


def product_to_schema(product: Product) -> ProductSchema:
    """Convert catalog product to response schema."""
    return ProductSchema(
        id=product.id,
        slug=product.slug,
        combined_slug=product.combined_slug,
        title=product.title,
        description=product.description,
        brand=product.brand,
        category=product.category,
        price_krw=product.price_krw,
        discount_percent=product.discount_percent,
        final_price=float(product.effective_price),
        rating=product.rating,
        rating_count=product.rating_count,
        stock=product.stock,
        is_on_sale=product.is_on_sale,
        is_out_of_stock=product.is_out_of_stock,
        is_low_stock=product.is_low_stock,
        images=[ProductImageSchema(url=i.url, w=i.w, h=i.h) for i in product.images],
        created_at=product.created_at,
    )


def result_to_response(result: PaginatedResult[Product]) -> ProductListResponse:
    """Convert paginated result to list response."""
    return ProductListResponse(
        items=[product_to_schema(p) for p in result.items],
        total_count=result.total_count,
        total_pages=result.total_pages,
        current_page=result.current_page,
        has_next=result.has_next,
        has_prev=result.has_prev,
        page_size=result.page_size,
        pages=page_window(result.current_page, result.total_pages),
    )


def price_range_to_response(price_range: PriceRange) -> PriceRangeResponse:
    return PriceRangeResponse(min=float(price_range.min), max=float(price_range.max))


def slugs_to_response(page: SlugPage) -> SlugListResponse:
    return SlugListResponse(slugs=page.slugs, has_more=page.has_more, total=page.total)
