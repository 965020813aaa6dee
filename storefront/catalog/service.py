"""Catalog service for product listing.

High-level service that runs the listing pipeline (filter, then sort, then
page) over the store's snapshot and exposes the read-only views the
storefront needs around it. Listing is a non-critical read path: any
internal failure degrades to an empty result instead of an error.
"""

from dataclasses import dataclass
from decimal import Decimal

import structlog

from storefront.catalog.filters import ProductFilter, apply_filters
from storefront.catalog.models import Product, effective_price
from storefront.catalog.pagination import PaginatedResult, paginate
from storefront.catalog.params import CatalogQuery
from storefront.catalog.slugs import decode_id
from storefront.catalog.sorting import DEFAULT_SORT, SortOption, apply_sort
from storefront.catalog.store import CatalogStore, get_catalog_store
from storefront.catalog.taxonomy import CATEGORIES
from storefront.infrastructure.config import settings

logger = structlog.get_logger()


@dataclass(frozen=True)
class PriceRange:
    """Lowest and highest effective price in the catalog."""

    min: Decimal
    max: Decimal


@dataclass(frozen=True)
class SlugPage:
    """A window of combined product slugs, for pre-rendering product pages.

    Attributes:
        slugs: Combined slugs in catalog order.
        has_more: Whether slugs remain after this window.
        total: Number of products in the catalog.
    """

    slugs: list[str]
    has_more: bool
    total: int


class CatalogService:
    """Service for catalog listing operations.

    Example usage:
        service = CatalogService(get_catalog_store())
        result = service.query(
            page=2,
            filters=ProductFilter(category="Books", in_stock=True),
            sort=SortOption.PRICE_ASC,
        )
    """

    def __init__(
        self,
        store: CatalogStore,
        page_size: int = 20,
        related_limit: int = 4,
        max_page_size: int | None = None,
    ) -> None:
        """Initialize service.

        Args:
            store: Product store.
            page_size: Default items per page.
            related_limit: Default number of related products.
            max_page_size: Upper bound on items per page; None means unbounded.
        """
        self.store = store
        self.page_size = page_size
        self.related_limit = related_limit
        self.max_page_size = max_page_size

    def query(
        self,
        page: int = 1,
        page_size: int | None = None,
        filters: ProductFilter | None = None,
        sort: SortOption | str | None = DEFAULT_SORT,
    ) -> PaginatedResult[Product]:
        """List one page of products.

        Args:
            page: Page number (1-indexed).
            page_size: Items per page; defaults to the service page size and
                is clamped to the maximum page size.
            filters: Filter constraints.
            sort: Ordering; unknown values fall back to newest.

        Returns:
            Paginated products, or an empty result if anything failed.
        """
        size = self.page_size if page_size is None else page_size
        if self.max_page_size is not None:
            size = min(size, self.max_page_size)
        try:
            products = self.store.load()
            filtered = apply_filters(products, filters)
            ordered = apply_sort(filtered, sort)
            return paginate(ordered, page, size)
        except Exception:
            logger.exception(
                "Catalog query failed",
                page=page,
                page_size=size,
                filters=filters.to_dict() if filters else {},
                sort=str(sort),
            )
            return PaginatedResult.empty(page, size)

    def search(self, params: CatalogQuery, page_size: int | None = None) -> PaginatedResult[Product]:
        """List products for parsed query parameters.

        Args:
            params: Parsed listing request.
            page_size: Items per page; defaults to the service page size.

        Returns:
            Paginated products.
        """
        return self.query(
            page=params.page,
            page_size=page_size,
            filters=params.filters,
            sort=params.sort,
        )

    def get_product(self, product_id: int) -> Product | None:
        """Get product by id.

        Args:
            product_id: Product id.

        Returns:
            Product if found.
        """
        try:
            return self.store.get(product_id)
        except Exception:
            logger.exception("Product lookup failed", product_id=product_id)
            return None

    def get_product_by_slug(self, combined_slug: str) -> Product | None:
        """Get product by its combined ``"<id>-<slug>"`` identifier.

        Args:
            combined_slug: Slug from the product URL.

        Returns:
            Product if the slug decodes and the id exists.
        """
        product_id = decode_id(combined_slug)
        if product_id is None:
            logger.warning("Invalid slug format", slug=combined_slug)
            return None
        return self.get_product(product_id)

    def related_products(self, product_id: int, limit: int | None = None) -> list[Product]:
        """Get the best rated products from the same category.

        Args:
            product_id: Product to find relatives for. Never included itself.
            limit: Maximum results; defaults to the service related limit.

        Returns:
            Related products by rating, highest first; empty if the id is unknown.
        """
        limit = self.related_limit if limit is None else limit
        try:
            current = self.store.get(product_id)
            if current is None:
                return []

            related = [
                p
                for p in self.store.load()
                if p.id != product_id and p.category == current.category
            ]
            related = apply_sort(related, SortOption.RATING)
            return related[:max(limit, 0)]
        except Exception:
            logger.exception("Related products lookup failed", product_id=product_id)
            return []

    def categories(self) -> list[str]:
        """Get all categories, including ones without products."""
        return list(CATEGORIES)

    def brands(self) -> list[str]:
        """Get distinct brands present in the catalog, sorted."""
        try:
            return sorted({p.brand for p in self.store.load()})
        except Exception:
            logger.exception("Brand listing failed")
            return []

    def price_range(self) -> PriceRange:
        """Get the lowest and highest effective price.

        Returns:
            Price bounds; both zero for an empty catalog.
        """
        try:
            prices = [effective_price(p) for p in self.store.load()]
        except Exception:
            logger.exception("Price range computation failed")
            prices = []

        if not prices:
            return PriceRange(min=Decimal(0), max=Decimal(0))
        return PriceRange(min=min(prices), max=max(prices))

    def product_slugs(self, offset: int = 0, limit: int = 1000) -> SlugPage:
        """List combined slugs in catalog order, one window at a time.

        Args:
            offset: Index of the first product.
            limit: Window size.

        Returns:
            Slug window with continuation flag.
        """
        try:
            products = self.store.load()
        except Exception:
            logger.exception("Slug listing failed", offset=offset, limit=limit)
            return SlugPage(slugs=[], has_more=False, total=0)

        offset = max(offset, 0)
        limit = max(limit, 0)
        total = len(products)
        return SlugPage(
            slugs=[p.combined_slug for p in products[offset:offset + limit]],
            has_more=offset + limit < total,
            total=total,
        )

    def is_available(self) -> bool:
        """Check whether the catalog loaded successfully."""
        return self.store.load_result().ok


def get_catalog_service() -> CatalogService:
    """Build a service over the process-wide store using settings."""
    return CatalogService(
        get_catalog_store(),
        page_size=settings.page_size,
        related_limit=settings.related_limit,
        max_page_size=settings.max_page_size,
    )
