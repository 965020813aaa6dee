"""Product slug codec.

Product URLs embed the numeric id in front of the human readable slug,
e.g. ``"42-wireless-mouse"``. Only the id identifies the product; the slug
part is for display.
"""

import re

_ID_PREFIX = re.compile(r"^([0-9]+)-")
_COMBINED = re.compile(r"([0-9]+)-(.+)")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def encode(product_id: int, slug: str) -> str:
    """Build a combined slug.

    Args:
        product_id: Product id.
        slug: Human readable slug.

    Returns:
        ``"<id>-<slug>"``.
    """
    return f"{product_id}-{slug}"


def decode_id(combined_slug: str) -> int | None:
    """Extract the product id from a combined slug.

    Args:
        combined_slug: Slug of the form ``"<digits>-<anything>"``.

    Returns:
        The id, or None when the slug has no usable numeric prefix.
    """
    match = _ID_PREFIX.match(combined_slug)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # digit run beyond the interpreter's int conversion limit
        return None


def decode_slug_portion(combined_slug: str) -> str:
    """Strip the numeric id prefix from a combined slug.

    Args:
        combined_slug: Slug of the form ``"<digits>-<slug>"``.

    Returns:
        The slug part, or the input unchanged when it does not match.
    """
    match = _COMBINED.fullmatch(combined_slug)
    if match is None:
        return combined_slug
    return match.group(2)


def slugify(text: str) -> str:
    """Turn a title into a URL-safe slug.

    >>> slugify("Ergonomic Steel Chair!")
    'ergonomic-steel-chair'
    """
    return _NON_ALNUM.sub("-", text.lower()).strip("-")
