"""Product API endpoints.

Thin HTTP adapter over ``CatalogService``: reads raw query parameters,
hands them to the catalog core and shapes the result.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from storefront.api.schemas import (
    BrandListResponse,
    CategoryListResponse,
    ErrorResponse,
    PriceRangeResponse,
    ProductListResponse,
    ProductSchema,
    RelatedProductsResponse,
    SlugListResponse,
    price_range_to_response,
    product_to_schema,
    result_to_response,
    slugs_to_response,
)
from storefront.catalog.models import Product
from storefront.catalog.params import parse_catalog_query
from storefront.catalog.service import CatalogService, get_catalog_service
from storefront.infrastructure.config import settings

router = APIRouter(tags=["Catalog"])


def get_service() -> CatalogService:
    """Get catalog service dependency."""
    return get_catalog_service()


def _resolve_product(service: CatalogService, combined_slug: str) -> Product:
    product = service.get_product_by_slug(combined_slug)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "PRODUCT_NOT_FOUND",
                "message": f"Product not found: {combined_slug}",
            },
        )
    return product


# ============================================================================
# Listing
# ============================================================================


@router.get(
    "/products",
    response_model=ProductListResponse,
    summary="List products",
    description=(
        "Filter, sort and paginate the catalog. Accepts page, category, brand, "
        "search, minPrice, maxPrice, inStock and sort query parameters; "
        "unparsable values fall back to their defaults."
    ),
)
async def list_products(
    request: Request,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductListResponse:
    """List one page of products.

    Parameters are read from the raw query string so that malformed values
    degrade to defaults instead of producing validation errors.

    Returns:
        Paginated products.
    """
    params = parse_catalog_query(request.query_params)
    result = service.search(params, page_size=settings.page_size)
    return result_to_response(result)


@router.get(
    "/products/slugs",
    response_model=SlugListResponse,
    summary="List product slugs",
)
async def list_product_slugs(
    service: Annotated[CatalogService, Depends(get_service)],
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=10000)] = 1000,
) -> SlugListResponse:
    """List combined product slugs in catalog order.

    Returns:
        Window of slugs with continuation flag.
    """
    return slugs_to_response(service.product_slugs(offset=offset, limit=limit))


# ============================================================================
# Product detail
# ============================================================================


@router.get(
    "/products/{combined_slug}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse, "description": "Product not found"}},
    summary="Get product",
)
async def get_product(
    combined_slug: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductSchema:
    """Get a product by its ``"<id>-<slug>"`` identifier.

    Raises:
        HTTPException: If the slug is malformed or the product does not exist.
    """
    return product_to_schema(_resolve_product(service, combined_slug))


@router.get(
    "/products/{combined_slug}/related",
    response_model=RelatedProductsResponse,
    responses={404: {"model": ErrorResponse, "description": "Product not found"}},
    summary="Get related products",
)
async def get_related_products(
    combined_slug: str,
    service: Annotated[CatalogService, Depends(get_service)],
    limit: Annotated[int | None, Query(ge=1, le=50)] = None,
) -> RelatedProductsResponse:
    """Get the best rated products from the same category.

    Raises:
        HTTPException: If the slug is malformed or the product does not exist.
    """
    product = _resolve_product(service, combined_slug)
    related = service.related_products(product.id, limit=limit)
    return RelatedProductsResponse(
        product_id=product.id,
        items=[product_to_schema(p) for p in related],
    )


# ============================================================================
# Reference data
# ============================================================================


@router.get("/categories", response_model=CategoryListResponse, summary="List categories")
async def list_categories(
    service: Annotated[CatalogService, Depends(get_service)],
) -> CategoryListResponse:
    """List every category, including empty ones."""
    return CategoryListResponse(categories=service.categories())


@router.get("/brands", response_model=BrandListResponse, summary="List brands")
async def list_brands(
    service: Annotated[CatalogService, Depends(get_service)],
) -> BrandListResponse:
    """List brands present in the catalog."""
    return BrandListResponse(brands=service.brands())


@router.get("/price-range", response_model=PriceRangeResponse, summary="Get price range")
async def get_price_range(
    service: Annotated[CatalogService, Depends(get_service)],
) -> PriceRangeResponse:
    """Get the lowest and highest effective price."""
    return price_range_to_response(service.price_range())
