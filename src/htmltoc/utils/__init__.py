#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/utils/__init__.py
"""Utility modules for htmltoc package."""

from htmltoc.utils.text import collapse_whitespace, slugify, unique_slug

__all__ = [
    "collapse_whitespace",
    "slugify",
    "unique_slug",
]
