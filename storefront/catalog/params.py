"""Parsing of raw listing query parameters.

Request layers hand over query parameters as optional strings. Parsing is
lenient: anything unusable falls back to its default instead of failing
the request.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from storefront.catalog.filters import ProductFilter
from storefront.catalog.sorting import DEFAULT_SORT, SortOption, normalize_sort

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_TRUTHY = {"true", "1", "yes", "on"}


@dataclass(frozen=True)
class CatalogQuery:
    """Parsed listing request.

    Attributes:
        page: Page number (1-indexed).
        filters: Filter constraints.
        sort: Ordering.
    """

    page: int = 1
    filters: ProductFilter = field(default_factory=ProductFilter)
    sort: SortOption = DEFAULT_SORT


def parse_int(value: str | None) -> int | None:
    """Parse the leading integer of a string.

    ``"12abc"`` parses as 12, matching how browsers' query strings are
    usually read; a string with no leading digits, or too many of them,
    gives None.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def parse_page(value: str | None) -> int:
    """Parse a page number; missing, invalid or non-positive gives 1."""
    page = parse_int(value)
    if page is None or page < 1:
        return 1
    return page


def parse_flag(value: str | None) -> bool | None:
    """Parse a boolean switch; only explicit truthy tokens turn it on."""
    if value is not None and value.strip().lower() in _TRUTHY:
        return True
    return None


def _text(value: str | None) -> str | None:
    return value or None


def _first(params: Mapping[str, str | None], *names: str) -> str | None:
    for name in names:
        value = params.get(name)
        if value is not None:
            return value
    return None


def parse_catalog_query(params: Mapping[str, str | None]) -> CatalogQuery:
    """Build a catalog query from raw query parameters.

    Accepts the camelCase names used in listing URLs (``minPrice``,
    ``maxPrice``, ``inStock``) as well as their snake_case spellings.

    Args:
        params: Query parameters, e.g. ``request.query_params``.

    Returns:
        Parsed query.
    """
    filters = ProductFilter(
        category=_text(params.get("category")),
        brand=_text(params.get("brand")),
        min_price=parse_int(_first(params, "minPrice", "min_price")),
        max_price=parse_int(_first(params, "maxPrice", "max_price")),
        in_stock=parse_flag(_first(params, "inStock", "in_stock")),
        search=_text(params.get("search")),
    )
    return CatalogQuery(
        page=parse_page(params.get("page")),
        filters=filters,
        sort=normalize_sort(params.get("sort")),
    )
