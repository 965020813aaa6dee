"""Product sorting.

All orderings use Python's stable sort, so products with equal keys keep
their input order. Descending orderings sort with ``reverse=True``, which
preserves that guarantee.
"""

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from storefront.catalog.models import Product, effective_price


class SortOption(str, Enum):
    """Supported product orderings."""

    NEWEST = "newest"
    OLDEST = "oldest"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING = "rating"
    POPULARITY = "popularity"


DEFAULT_SORT = SortOption.NEWEST

# sort option -> (key function, descending)
_SORT_KEYS: dict[SortOption, tuple[Callable[[Product], Any], bool]] = {
    SortOption.NEWEST: (lambda p: p.created_at, True),
    SortOption.OLDEST: (lambda p: p.created_at, False),
    SortOption.PRICE_ASC: (effective_price, False),
    SortOption.PRICE_DESC: (effective_price, True),
    SortOption.RATING: (lambda p: p.rating, True),
    SortOption.POPULARITY: (lambda p: p.rating_count, True),
}


def normalize_sort(value: SortOption | str | None) -> SortOption:
    """Map a raw sort token to a sort option.

    Unknown or missing tokens fall back to ``newest``.

    Args:
        value: Sort token such as ``"price-asc"``.

    Returns:
        Matching sort option.
    """
    if isinstance(value, SortOption):
        return value
    if not value:
        return DEFAULT_SORT
    try:
        return SortOption(value.strip().lower())
    except ValueError:
        return DEFAULT_SORT


def apply_sort(
    products: Iterable[Product],
    sort: SortOption | str | None = DEFAULT_SORT,
) -> list[Product]:
    """Sort products into a new list.

    Args:
        products: Products to sort. Not modified.
        sort: Sort option or raw token.

    Returns:
        New sorted list.
    """
    key, descending = _SORT_KEYS[normalize_sort(sort)]
    return sorted(products, key=key, reverse=descending)
