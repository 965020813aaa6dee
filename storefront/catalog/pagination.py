"""Pagination of sorted product lists.

Out-of-range pages are not an error: they produce an empty page whose
metadata still echoes the requested page number.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from storefront.catalog.exceptions import InvalidPageSizeError

T = TypeVar("T")

# Page links shown at once before the window collapses with ellipses
MAX_VISIBLE_PAGES = 7


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: Items on the current page.
        total_count: Number of items across all pages.
        current_page: Requested page (1-indexed), echoed as given.
        page_size: Items per page.
    """

    items: list[T]
    total_count: int
    current_page: int
    page_size: int

    @classmethod
    def empty(cls, page: int = 1, page_size: int = 20) -> "PaginatedResult[T]":
        """Zero-result envelope for the given page."""
        return cls(items=[], total_count=0, current_page=page, page_size=page_size)

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        if self.total_count <= 0:
            return 0
        return (self.total_count + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.current_page < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.total_pages > 0 and self.current_page > 1

    def to_dict(self) -> dict:
        """Envelope shape shared by every consumer of a listing."""
        return {
            "items": list(self.items),
            "total_count": self.total_count,
            "total_pages": self.total_pages,
            "current_page": self.current_page,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
        }


def paginate(items: Sequence[T], page: int, page_size: int) -> PaginatedResult[T]:
    """Slice one page out of a sequence.

    Args:
        items: Full, already sorted sequence.
        page: Page number (1-indexed). Values below 1 or past the last page
            give an empty page.
        page_size: Items per page.

    Returns:
        The page and its metadata.

    Raises:
        InvalidPageSizeError: If ``page_size`` is below 1.
    """
    if page_size < 1:
        raise InvalidPageSizeError(page_size)

    if page < 1:
        page_items: list[T] = []
    else:
        start = (page - 1) * page_size
        page_items = list(items[start:start + page_size])

    return PaginatedResult(
        items=page_items,
        total_count=len(items),
        current_page=page,
        page_size=page_size,
    )


def page_window(current_page: int, total_pages: int) -> list[int | None]:
    """Page numbers to show in a pagination control.

    Shows every page when there are few; otherwise the first and last page
    plus a small run around the current page, with ``None`` standing for an
    ellipsis.

    >>> page_window(1, 10)
    [1, 2, 3, 4, 5, None, 10]
    >>> page_window(6, 10)
    [1, None, 5, 6, 7, None, 10]

    Args:
        current_page: Page being displayed.
        total_pages: Number of pages.

    Returns:
        Page numbers and ellipsis markers in display order.
    """
    if total_pages <= MAX_VISIBLE_PAGES:
        return list(range(1, total_pages + 1))

    pages: list[int | None] = [1]

    if current_page <= 4:
        pages.extend(range(2, min(5, total_pages - 1) + 1))
        pages.append(None)
    elif current_page >= total_pages - 3:
        pages.append(None)
        pages.extend(range(max(total_pages - 4, 2), total_pages))
    else:
        pages.append(None)
        pages.extend(range(current_page - 1, current_page + 2))
        pages.append(None)

    pages.append(total_pages)
    return pages
