"""Static catalog taxonomy.

The category list is a fixed, closed set: every product belongs to exactly
one of these, and the listing exposes all of them even when a category has
no products.
"""

CATEGORIES: tuple[str, ...] = (
    "Electronics",
    "Home",
    "Beauty",
    "Fashion",
    "Sports",
    "Books",
    "Toys",
    "Office",
    "Pet",
    "Automotive",
    "Garden",
    "Health",
    "Baby",
    "Music",
    "Games",
    "Outdoors",
    "Photo",
    "Appliances",
    "DIY",
    "Food",
)

# Synthetic brand names used by the dataset generator
BRANDS: tuple[str, ...] = (
    "Acme",
    "Zenova",
    "HyperTech",
    "K-Craft",
    "NeoLife",
    "SunLabs",
    "Cloud9",
    "K-Home",
    "FitGo",
    "ProSound",
)


def is_category(name: str) -> bool:
    """Check whether ``name`` is one of the fixed categories."""
    return name in CATEGORIES
