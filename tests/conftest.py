"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

import storefront.catalog.store as store_module
from storefront.catalog.models import Product
from storefront.catalog.service import CatalogService
from storefront.catalog.store import CatalogStore, StaticSource

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def build_product(product_id: int, **overrides: Any) -> Product:
    """Build a product with sensible defaults; later ids are newer."""
    data: dict[str, Any] = {
        "id": product_id,
        "slug": f"product-{product_id:05d}",
        "title": f"Product {product_id}",
        "description": "Test product",
        "brand": "Acme",
        "category": "Electronics",
        "price_krw": 10000,
        "discount_percent": 0,
        "rating": 4.0,
        "rating_count": 10,
        "stock": 5,
        "images": [{"url": f"https://img.test/{product_id}.jpg", "w": 320, "h": 320}],
        "created_at": BASE_TIME + timedelta(days=product_id),
    }
    data.update(overrides)
    return Product(**data)


@pytest.fixture(autouse=True)
def reset_store():
    """Reset the process-wide store before and after each test."""
    store_module._catalog_store = None
    yield
    store_module._catalog_store = None


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory for test products."""
    return build_product


@pytest.fixture
def sample_products() -> list[Product]:
    """Small, hand-built catalog covering the filter and sort edge cases."""
    return [
        build_product(
            1, title="Wireless Mouse", brand="ProSound", category="Electronics",
            price_krw=30000, discount_percent=0, rating=4.5, rating_count=120, stock=0,
        ),
        build_product(
            2, title="Mechanical Keyboard", brand="HyperTech", category="Electronics",
            price_krw=100000, discount_percent=25, rating=4.8, rating_count=50, stock=12,
        ),
        build_product(
            3, title="Cotton Towels", brand="K-Home", category="Home",
            price_krw=20000, discount_percent=10, rating=3.9, rating_count=300, stock=40,
        ),
        build_product(
            4, title="Gaming Mouse Pad", brand="HyperTech", category="Electronics",
            price_krw=30000, discount_percent=0, rating=4.5, rating_count=75, stock=3,
        ),
        build_product(
            5, title="Steel Chair", brand="Acme", category="Office",
            price_krw=250000, discount_percent=40, rating=4.1, rating_count=8, stock=9,
        ),
        build_product(
            6, title="Bluetooth Speaker", brand="ProSound", category="Electronics",
            price_krw=80000, discount_percent=0, rating=3.2, rating_count=20, stock=100,
        ),
    ]


@pytest.fixture
def catalog_store(sample_products: list[Product]) -> CatalogStore:
    """Store over the sample catalog."""
    return CatalogStore(StaticSource(sample_products))


@pytest.fixture
def catalog_service(catalog_store: CatalogStore) -> CatalogService:
    """Service over the sample catalog."""
    return CatalogService(catalog_store, page_size=20, related_limit=4)


@pytest.fixture
def client(catalog_store: CatalogStore) -> TestClient:
    """Test client serving the sample catalog."""
    from storefront.main import app

    store_module.set_catalog_store(catalog_store)
    with TestClient(app) as test_client:
        yield test_client
