#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/utils/text.py
"""Text processing utilities for heading ids.

This module provides the slug functions used to derive element ids from
heading text when a heading has no id of its own.

Functions
---------
slugify : Convert text to a URL-fragment-safe slug
unique_slug : Disambiguate a slug against the ids already taken
collapse_whitespace : Normalize runs of whitespace to single spaces

Examples
--------
Basic slugification:

    >>> from htmltoc.utils.text import slugify
    >>> slugify("My Heading Title")
    'my-heading-title'

Diacritics are transliterated:

    >>> slugify("Café résumé")
    'cafe-resume'

Unique slug generation with counter:

    >>> taken = {"intro"}
    >>> unique_slug("intro", taken)
    'intro-2'
    >>> unique_slug("intro", taken)
    'intro-3'

"""

from __future__ import annotations

import re
import unicodedata
from typing import MutableSet

from htmltoc.constants import EMPTY_SLUG_FALLBACK

_NON_ALNUM_RUN = re.compile(r"[\W_]+")
_UNWANTED_CHARS = re.compile(r"[^-\w]+", re.ASCII)
_HYPHEN_RUN = re.compile(r"-+")
_WHITESPACE_RUN = re.compile(r"\s+")

# Letters without a Unicode decomposition, spelled out before the ASCII encode
_TRANSLITERATIONS = str.maketrans(
    {
        "ß": "ss",
        "Æ": "AE",
        "æ": "ae",
        "Œ": "OE",
        "œ": "oe",
        "Ø": "O",
        "ø": "o",
        "Đ": "D",
        "đ": "d",
        "Ł": "L",
        "ł": "l",
        "Þ": "TH",
        "þ": "th",
    }
)


def slugify(text: str) -> str:
    """Create a URL-fragment-safe slug from heading text.

    The slug is built by:
    - Replacing every run of non-letter, non-digit characters with a hyphen
    - Transliterating to ASCII (diacritics stripped, letters such as ``ß`` or
      ``œ`` spelled out, other characters dropped)
    - Removing anything outside ``[A-Za-z0-9_-]``
    - Trimming leading/trailing hyphens and collapsing repeated hyphens
    - Lowercasing

    Parameters
    ----------
    text : str
        Heading text

    Returns
    -------
    str
        Non-empty slug; ``"n-a"`` when nothing usable remains

    Examples
    --------
    Handle special characters:
        >>> slugify("API Reference (v2.0)")
        'api-reference-v2-0'

    Nothing left after transliteration:
        >>> slugify("日本語")
        'n-a'

    """
    # Compose first so precomposed letters count as letters, not letter + mark
    normalized = unicodedata.normalize("NFC", text)
    slug = _NON_ALNUM_RUN.sub("-", normalized)

    decomposed = unicodedata.normalize("NFKD", slug)
    slug = "".join(char for char in decomposed if not unicodedata.combining(char))
    slug = slug.translate(_TRANSLITERATIONS)
    slug = slug.encode("ascii", "ignore").decode("ascii")

    slug = _UNWANTED_CHARS.sub("", slug)
    slug = slug.strip("-")
    slug = _HYPHEN_RUN.sub("-", slug)
    slug = slug.lower()

    return slug or EMPTY_SLUG_FALLBACK


def unique_slug(slug: str, taken: MutableSet[str], separator: str = "-") -> str:
    """Return ``slug`` or the first free ``slug-N`` and record it as taken.

    Parameters
    ----------
    slug : str
        Base slug
    taken : MutableSet[str]
        Ids already in use (mutated in-place)
    separator : str, default "-"
        Separator placed before the numeric suffix

    Returns
    -------
    str
        An id not previously in ``taken``

    Notes
    -----
    Suffixes start at 2, so the first heading keeps the bare slug and the
    result only depends on the order in which slugs are requested.

    """
    if slug not in taken:
        taken.add(slug)
        return slug

    counter = 2
    while f"{slug}{separator}{counter}" in taken:
        counter += 1

    candidate = f"{slug}{separator}{counter}"
    taken.add(candidate)
    return candidate


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace to single spaces and strip the ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


__all__ = [
    "slugify",
    "unique_slug",
    "collapse_whitespace",
]
