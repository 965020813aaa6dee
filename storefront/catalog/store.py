"""In-memory catalog store.

Loads the full product collection once from a source and serves the same
immutable snapshot to every reader for the lifetime of the store.
"""

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import structlog
from pydantic import TypeAdapter, ValidationError

from storefront.catalog.exceptions import CatalogError, CatalogLoadError, DuplicateProductIdError
from storefront.catalog.models import Product
from storefront.infrastructure.config import settings

logger = structlog.get_logger()

_product_list = TypeAdapter(list[Product])


# ============================================================================
# Sources
# ============================================================================


class ProductSource(Protocol):
    """Anything that can return the complete product collection."""

    def read(self) -> list[Product]:
        """Read every product.

        Raises:
            CatalogLoadError: If the source cannot be read or parsed.
        """
        ...


class JsonFileSource:
    """Product source backed by the JSON file written by the seeder."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"JsonFileSource({str(self.path)!r})"

    def read(self) -> list[Product]:
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise CatalogLoadError(str(self.path), e.strerror or str(e)) from e

        try:
            return _product_list.validate_json(raw)
        except ValidationError as e:
            raise CatalogLoadError(
                str(self.path), f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}"
            ) from e


class StaticSource:
    """Product source over products already held in memory."""

    def __init__(self, products: Iterable[Product | dict]) -> None:
        self._products = list(products)

    def __repr__(self) -> str:
        return f"StaticSource({len(self._products)} products)"

    def read(self) -> list[Product]:
        try:
            return [
                p if isinstance(p, Product) else Product.model_validate(p)
                for p in self._products
            ]
        except ValidationError as e:
            raise CatalogLoadError(repr(self), str(e)) from e


# ============================================================================
# Load result
# ============================================================================


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading the catalog.

    Either the full parsed collection with no error, or an empty collection
    with the reason loading failed. Never a partial collection.
    """

    products: tuple[Product, ...] = ()
    error: str | None = None
    _index: dict[int, Product] = field(default_factory=dict, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, products: Iterable[Product]) -> "LoadResult":
        """Build a successful result and its id index.

        Raises:
            DuplicateProductIdError: If two products share an id.
        """
        snapshot = tuple(products)
        index: dict[int, Product] = {}
        for product in snapshot:
            if product.id in index:
                raise DuplicateProductIdError(product.id)
            index[product.id] = product
        return cls(products=snapshot, error=None, _index=index)

    @classmethod
    def failed(cls, error: str) -> "LoadResult":
        return cls(products=(), error=error)

    def get(self, product_id: int) -> Product | None:
        return self._index.get(product_id)


# ============================================================================
# Store
# ============================================================================


class CatalogStore:
    """Lazily loaded, read-only product collection.

    The first call to ``load_result()`` reads the source; every later call,
    including concurrent first calls, gets the same cached result. A failed
    load is cached as well, so a broken source is read at most once.

    Example usage:
        store = CatalogStore(JsonFileSource("data/products.json"))
        products = store.load()
    """

    def __init__(self, source: ProductSource) -> None:
        """Initialize store.

        Args:
            source: Where products are read from on first access.
        """
        self.source = source
        self._result: LoadResult | None = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._result is not None

    def load_result(self) -> LoadResult:
        """Get the cached load result, loading on first access."""
        result = self._result
        if result is not None:
            return result

        with self._lock:
            if self._result is None:
                self._result = self._read_source()
            return self._result

    def load(self) -> tuple[Product, ...]:
        """Get all products; empty if loading failed."""
        return self.load_result().products

    def get(self, product_id: int) -> Product | None:
        """Get product by id.

        Args:
            product_id: Product id.

        Returns:
            Product if found, None otherwise.
        """
        return self.load_result().get(product_id)

    def _read_source(self) -> LoadResult:
        try:
            result = LoadResult.success(self.source.read())
        except CatalogError as e:
            logger.error(
                "Failed to load catalog",
                source=repr(self.source),
                error=e.message,
                details=e.details,
            )
            return LoadResult.failed(e.message)
        except ValueError as e:
            logger.error("Failed to load catalog", source=repr(self.source), error=str(e))
            return LoadResult.failed(str(e))
        except Exception as e:
            logger.exception("Unexpected error loading catalog", source=repr(self.source))
            return LoadResult.failed(str(e) or type(e).__name__)

        logger.info("Catalog loaded", source=repr(self.source), product_count=len(result.products))
        return result


# Global catalog store instance
_catalog_store: CatalogStore | None = None
_catalog_store_lock = threading.Lock()


def get_catalog_store(data_path: str | Path | None = None) -> CatalogStore:
    """Get or create the process-wide catalog store.

    Args:
        data_path: Dataset path. Defaults to ``settings.data_path``; only used
            when the store is created.

    Returns:
        CatalogStore instance.
    """
    global _catalog_store
    if _catalog_store is None:
        with _catalog_store_lock:
            if _catalog_store is None:
                _catalog_store = CatalogStore(JsonFileSource(data_path or settings.data_path))
    return _catalog_store


def set_catalog_store(store: CatalogStore | None) -> None:
    """Replace the process-wide store (None resets it)."""
    global _catalog_store
    _catalog_store = store


def reset_catalog_store() -> None:
    """Forget the process-wide store so the next access rebuilds it."""
    set_catalog_store(None)
