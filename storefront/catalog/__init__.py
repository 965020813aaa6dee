"""Product Catalog Service.

Provides the catalog query engine: a lazily loaded product store, slug
codec, filtering, sorting and pagination, composed by ``CatalogService``.
"""

from storefront.catalog.filters import ProductFilter, apply_filters
from storefront.catalog.generator import GeneratorConfig, ProductGenerator
from storefront.catalog.models import Product, ProductImage, effective_price
from storefront.catalog.pagination import PaginatedResult, page_window, paginate
from storefront.catalog.params import CatalogQuery, parse_catalog_query
from storefront.catalog.service import CatalogService, PriceRange, SlugPage
from storefront.catalog.sorting import SortOption, apply_sort, normalize_sort
from storefront.catalog.store import (
    CatalogStore,
    JsonFileSource,
    LoadResult,
    StaticSource,
    get_catalog_store,
)
from storefront.catalog.taxonomy import BRANDS, CATEGORIES

__all__ = [
    # Taxonomy
    "BRANDS",
    "CATEGORIES",
    # Models
    "Product",
    "ProductImage",
    "effective_price",
    # Generator
    "GeneratorConfig",
    "ProductGenerator",
    # Store
    "CatalogStore",
    "JsonFileSource",
    "LoadResult",
    "StaticSource",
    "get_catalog_store",
    # Pipeline
    "ProductFilter",
    "apply_filters",
    "SortOption",
    "apply_sort",
    "normalize_sort",
    "PaginatedResult",
    "paginate",
    "page_window",
    # Service
    "CatalogQuery",
    "parse_catalog_query",
    "CatalogService",
    "PriceRange",
    "SlugPage",
]
