"""Tests for product catalog generator."""

import json
from pathlib import Path

import pytest

from storefront.catalog.generator import (
    DEFAULT_ANCHOR,
    GeneratorConfig,
    ProductGenerator,
    write_dataset,
)
from storefront.catalog.slugs import decode_id
from storefront.catalog.store import CatalogStore, JsonFileSource
from storefront.catalog.taxonomy import BRANDS, CATEGORIES


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_small_config(self) -> None:
        config = GeneratorConfig.small()
        assert config.count == 200
        assert config.seed == 42

    def test_full_config(self) -> None:
        config = GeneratorConfig.full()
        assert config.count == 10000
        assert config.count > GeneratorConfig.small().count


class TestProductGenerator:
    """Tests for ProductGenerator."""

    @pytest.fixture
    def products(self):
        return ProductGenerator(GeneratorConfig(seed=42, count=150)).generate_list()

    def test_generates_requested_count(self, products) -> None:
        assert len(products) == 150
        assert [p.id for p in products] == list(range(1, 151))

    def test_deterministic_generation(self) -> None:
        """Same seed produces same products."""
        products1 = ProductGenerator(GeneratorConfig(seed=7, count=20)).generate_list()
        products2 = ProductGenerator(GeneratorConfig(seed=7, count=20)).generate_list()
        assert products1 == products2

    def test_different_seeds_produce_different_products(self) -> None:
        products1 = ProductGenerator(GeneratorConfig(seed=1, count=20)).generate_list()
        products2 = ProductGenerator(GeneratorConfig(seed=2, count=20)).generate_list()
        assert {p.title for p in products1} != {p.title for p in products2}

    def test_value_ranges(self, products) -> None:
        for product in products:
            assert product.category in CATEGORIES
            assert product.brand in BRANDS
            assert 5000 <= product.price_krw <= 999000
            assert 0 <= product.discount_percent <= 40
            assert 3.0 <= product.rating <= 5.0
            assert product.rating == round(product.rating, 1)
            assert 0 <= product.rating_count <= 5000
            assert 0 <= product.stock <= 200
            assert product.created_at <= DEFAULT_ANCHOR
            assert [i.w for i in product.images] == [320, 640, 1200]

    def test_slugs_encode_id(self, products) -> None:
        for product in products:
            assert product.slug.endswith(f"-{product.id:05d}")
            assert decode_id(product.combined_slug) == product.id


class TestWriteDataset:
    """Tests for write_dataset."""

    def test_written_dataset_loads(self, tmp_path: Path) -> None:
        products = ProductGenerator(GeneratorConfig(count=25)).generate_list()
        path = tmp_path / "data" / "products.json"

        written = write_dataset(products, path)

        assert written == 25
        records = json.loads(path.read_text(encoding="utf-8"))
        assert "priceKRW" in records[0]
        assert "createdAt" in records[0]
        assert CatalogStore(JsonFileSource(path)).load() == tuple(products)
