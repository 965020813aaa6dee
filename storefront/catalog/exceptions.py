"""Catalog exceptions.

Errors raised inside the catalog core. None of them escape the public
methods of ``CatalogService``: the store turns source failures into an
empty ``LoadResult`` and the service turns everything else into an empty
result.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog exceptions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CatalogLoadError(CatalogError):
    """Raised when the backing product source cannot be read or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        """Initialize catalog load error.

        Args:
            source: Description of the source (e.g. file path).
            reason: Why loading failed.
        """
        super().__init__(
            f"Failed to load products from {source}: {reason}",
            details={"source": source, "reason": reason},
        )


class DuplicateProductIdError(CatalogError):
    """Raised when the product source contains the same id twice."""

    def __init__(self, product_id: int) -> None:
        """Initialize duplicate product id error.

        Args:
            product_id: The repeated product id.
        """
        super().__init__(
            f"Duplicate product id {product_id} in catalog source",
            details={"product_id": product_id},
        )


class InvalidPageSizeError(CatalogError):
    """Raised when a page size below 1 is requested."""

    def __init__(self, page_size: int) -> None:
        """Initialize invalid page size error.

        Args:
            page_size: The rejected page size.
        """
        super().__init__(
            f"Page size must be a positive integer, got {page_size}",
            details={"page_size": page_size},
        )
