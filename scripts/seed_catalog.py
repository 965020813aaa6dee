#!/usr/bin/env python3
"""Seed product catalog script.

Generates the synthetic product dataset served by the storefront and
writes it as a JSON array.

Usage:
    python scripts/seed_catalog.py --mode small
    python scripts/seed_catalog.py --mode full --output data/products.json
    python scripts/seed_catalog.py --count 500 --seed 7
"""

import argparse
from collections import Counter

from storefront.catalog.generator import GeneratorConfig, ProductGenerator, write_dataset
from storefront.infrastructure.config import settings


def build_config(mode: str, count: int | None, seed: int | None) -> GeneratorConfig:
    """Resolve generator config from CLI arguments.

    Args:
        mode: Catalog size preset (small/full).
        count: Optional product count overriding the preset.
        seed: Optional seed overriding the preset.

    Returns:
        Generator configuration.
    """
    config = GeneratorConfig.full() if mode == "full" else GeneratorConfig.small()
    if count is not None:
        config.count = count
    if seed is not None:
        config.seed = seed
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate the storefront product dataset",
    )
    parser.add_argument(
        "--mode",
        choices=["small", "full"],
        default="full",
        help="Catalog size: small (200 products) or full (10,000 products)",
    )
    parser.add_argument("--count", type=int, help="Number of products (overrides --mode)")
    parser.add_argument("--seed", type=int, help="Random seed (default: 42)")
    parser.add_argument(
        "--output",
        default=settings.data_path,
        help=f"Output file (default: {settings.data_path})",
    )

    args = parser.parse_args(argv)
    if args.count is not None and args.count < 0:
        parser.error("--count must not be negative")

    config = build_config(args.mode, args.count, args.seed)

    print("=" * 60)
    print("Storefront Catalog Seeder")
    print("=" * 60)
    print(f"Mode: {args.mode}")
    print(f"Seed: {config.seed}")
    print(f"Count: {config.count}")
    print()

    products = ProductGenerator(config).generate_list()
    written = write_dataset(products, args.output)

    categories = Counter(p.category for p in products)
    print(f"  ✓ Wrote {written} products -> {args.output}")
    print(f"  ✓ Categories: {len(categories)}")
    print(f"  ✓ Brands: {len({p.brand for p in products})}")
    print(f"  ✓ Out of stock: {sum(1 for p in products if p.is_out_of_stock)}")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
