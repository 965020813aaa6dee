"""Storefront catalog browser: product listing, filtering, sorting and paging."""

__version__ = "0.1.0"
