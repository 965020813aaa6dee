"""Product filtering.

Every constraint in a ``ProductFilter`` is optional and all active
constraints must hold (AND). Filtering is stable and never mutates the
input sequence.
"""

from collections.abc import Iterable
from dataclasses import dataclass, fields

from storefront.catalog.models import Product, effective_price


@dataclass(frozen=True)
class ProductFilter:
    """Filter parameters for product listing.

    Attributes:
        category: Exact category name.
        brand: Exact brand name.
        min_price: Minimum effective price, inclusive.
        max_price: Maximum effective price, inclusive.
        in_stock: Only products with stock when True; False means no restriction.
        search: Case-insensitive substring of title or brand.
    """

    category: str | None = None
    brand: str | None = None
    min_price: int | None = None
    max_price: int | None = None
    in_stock: bool | None = None
    search: str | None = None

    @property
    def is_empty(self) -> bool:
        """Check if no constraint is active."""
        return (
            not self.category
            and not self.brand
            and self.min_price is None
            and self.max_price is None
            and not self.in_stock
            and not self.search
        )

    def to_dict(self) -> dict:
        """Active constraints only, for logging."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) not in (None, "", False)
        }


def matches(product: Product, filters: ProductFilter) -> bool:
    """Check whether a product satisfies every active constraint.

    Args:
        product: Product to test.
        filters: Filter to apply.

    Returns:
        True if the product passes.
    """
    if filters.category and product.category != filters.category:
        return False

    if filters.brand and product.brand != filters.brand:
        return False

    if filters.in_stock and product.stock <= 0:
        return False

    if filters.min_price is not None or filters.max_price is not None:
        price = effective_price(product)
        if filters.min_price is not None and price < filters.min_price:
            return False
        if filters.max_price is not None and price > filters.max_price:
            return False

    if filters.search:
        term = filters.search.lower()
        if term not in product.title.lower() and term not in product.brand.lower():
            return False

    return True


def apply_filters(
    products: Iterable[Product],
    filters: ProductFilter | None = None,
) -> list[Product]:
    """Filter products, keeping their relative order.

    Args:
        products: Products to filter.
        filters: Constraints; None or an empty filter keeps everything.

    Returns:
        New list of matching products.
    """
    if filters is None or filters.is_empty:
        return list(products)
    return [p for p in products if matches(p, filters)]
