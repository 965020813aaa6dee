"""Product catalog generator with deterministic seeding.

Generates the synthetic dataset the storefront serves. Each product is
built from its own seeded random stream, so the same seed and count always
produce the same catalog.
"""

import hashlib
import json
import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterable, Iterator

from storefront.catalog.models import Product, ProductImage
from storefront.catalog.slugs import slugify
from storefront.catalog.taxonomy import BRANDS, CATEGORIES


# ============================================================================
# Constants
# ============================================================================

ADJECTIVES = [
    "Awesome", "Elegant", "Ergonomic", "Fantastic", "Generic", "Gorgeous",
    "Handcrafted", "Incredible", "Intelligent", "Licensed", "Modern",
    "Practical", "Refined", "Rustic", "Sleek", "Small", "Tasty", "Unbranded",
]

MATERIALS = [
    "Bamboo", "Bronze", "Concrete", "Cotton", "Fresh", "Frozen", "Granite",
    "Leather", "Metal", "Plastic", "Rubber", "Soft", "Steel", "Wooden",
]

NOUNS = [
    "Bacon", "Ball", "Bike", "Car", "Chair", "Cheese", "Chicken", "Chips",
    "Computer", "Fish", "Gloves", "Hat", "Keyboard", "Mouse", "Pants",
    "Pizza", "Salad", "Sausages", "Shirt", "Shoes", "Soap", "Table", "Towels",
]

# Price bounds in won
MIN_PRICE_KRW = 5000
MAX_PRICE_KRW = 999000
MAX_DISCOUNT_PERCENT = 40
MAX_RATING_COUNT = 5000
MAX_STOCK = 200

IMAGE_SIZES = (320, 640, 1200)

# Creation dates fall within this window before the anchor
CREATED_WITHIN = timedelta(days=730)
DEFAULT_ANCHOR = datetime(2025, 1, 1, tzinfo=timezone.utc)


# ============================================================================
# Generator Configuration
# ============================================================================


@dataclass
class GeneratorConfig:
    """Configuration for product generation.

    Attributes:
        seed: Random seed for reproducibility.
        count: Number of products to generate.
        anchor: Latest possible creation timestamp.
    """

    seed: int = 42
    count: int = 10000
    anchor: datetime = DEFAULT_ANCHOR

    @classmethod
    def small(cls) -> "GeneratorConfig":
        """Create config for a small catalog (200 products)."""
        return cls(seed=42, count=200)

    @classmethod
    def full(cls) -> "GeneratorConfig":
        """Create config for the full catalog (10,000 products)."""
        return cls(seed=42, count=10000)


# ============================================================================
# Product Generator
# ============================================================================


class ProductGenerator:
    """Generates product catalogs with deterministic seeding.

    Example usage:
        generator = ProductGenerator(GeneratorConfig.small())
        for product in generator.generate():
            print(product.combined_slug)
    """

    def __init__(self, config: GeneratorConfig) -> None:
        """Initialize generator with configuration.

        Args:
            config: Generator configuration.
        """
        self.config = config

    def _deterministic_seed(self, *args: str | int) -> int:
        """Create deterministic seed from arguments.

        Args:
            args: Values to include in seed.

        Returns:
            Deterministic integer seed.
        """
        data = "|".join(str(a) for a in args)
        hash_bytes = hashlib.md5(data.encode()).digest()
        return int.from_bytes(hash_bytes[:4], "big")

    def _generate_images(self, product_id: int) -> tuple[ProductImage, ...]:
        base = f"https://picsum.photos/seed/{product_id}"
        return tuple(
            ProductImage(url=f"{base}/{size}/{size}", w=size, h=size)
            for size in IMAGE_SIZES
        )

    def _generate_product(self, product_id: int) -> Product:
        """Generate a single product.

        Args:
            product_id: Id to assign, starting at 1.

        Returns:
            Generated Product.
        """
        rng = random.Random(self._deterministic_seed(self.config.seed, product_id))

        adj = rng.choice(ADJECTIVES)
        material = rng.choice(MATERIALS)
        noun = rng.choice(NOUNS)
        title = f"{adj} {material} {noun}"

        category = rng.choice(CATEGORIES)
        brand = rng.choice(BRANDS)

        created_at = self.config.anchor - timedelta(
            seconds=rng.randint(0, int(CREATED_WITHIN.total_seconds()))
        )

        return Product(
            id=product_id,
            slug=f"{slugify(title)}-{product_id:05d}",
            title=title,
            description=f"The {adj.lower()} {noun.lower()} from {brand}, "
                        f"made of {material.lower()} for everyday {category.lower()} use.",
            brand=brand,
            category=category,
            price_krw=rng.randint(MIN_PRICE_KRW, MAX_PRICE_KRW),
            discount_percent=rng.randint(0, MAX_DISCOUNT_PERCENT),
            rating=rng.randint(30, 50) / 10,
            rating_count=rng.randint(0, MAX_RATING_COUNT),
            stock=rng.randint(0, MAX_STOCK),
            images=self._generate_images(product_id),
            created_at=created_at,
        )

    def generate(self) -> Iterator[Product]:
        """Generate products with ids ``1..count``.

        Yields:
            Product instances.
        """
        for product_id in range(1, self.config.count + 1):
            yield self._generate_product(product_id)

    def generate_list(self) -> list[Product]:
        """Generate all products as a list."""
        return list(self.generate())


def write_dataset(products: Iterable[Product], path: str | Path) -> int:
    """Write products as the JSON array the catalog store reads.

    Args:
        products: Products to write.
        path: Output file; parent directories are created.

    Returns:
        Number of products written.
    """
    records = [p.model_dump(mode="json", by_alias=True) for p in products]
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
    return len(records)
