#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/dom/markers.py
"""Placeholder markers that say where the TOC goes.

Two forms are recognized:

- a paragraph whose text is exactly the marker text (``<p>[toc]</p>``)
- a ``<toc>`` element, whose ``heading``, ``min-level``, ``max-level`` and
  ``min-headers`` attributes override the options for that page

Only the first marker in document order receives the TOC; any further
markers are removed.
"""

from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import Tag

from htmltoc.constants import MARKER_ATTRIBUTE_OVERRIDES, TOC_MARKER_ELEMENT

logger = logging.getLogger(__name__)


def _is_marker(tag: Tag, marker: str) -> bool:
    if tag.name == TOC_MARKER_ELEMENT:
        return True
    return tag.name == "p" and tag.get_text().strip() == marker


def find_markers(soup: BeautifulSoup, marker: str) -> list[Tag]:
    """Return every marker element in document order.

    Parameters
    ----------
    soup : BeautifulSoup
        Parsed document
    marker : str
        Placeholder paragraph text, e.g. ``"[toc]"``

    Returns
    -------
    list of Tag
        Marker elements (may be empty)

    """
    marker = marker.strip()
    return [tag for tag in soup.find_all(["p", TOC_MARKER_ELEMENT]) if _is_marker(tag, marker)]


def marker_overrides(tag: Tag) -> dict[str, Any]:
    """Read option overrides from a ``<toc>`` marker element.

    Attribute names are returned in option form (``max-level`` becomes
    ``max_level``); empty attributes are ignored. Paragraph markers carry no
    overrides.
    """
    if tag.name != TOC_MARKER_ELEMENT:
        return {}

    overrides: dict[str, Any] = {}
    for attribute in MARKER_ATTRIBUTE_OVERRIDES:
        value = tag.get(attribute)
        if isinstance(value, str) and value.strip():
            overrides[attribute.replace("-", "_")] = value.strip()
    return overrides


def _release_children(tag: Tag) -> None:
    # An unclosed <toc> swallows the content that follows it; keep that content
    if tag.name == TOC_MARKER_ELEMENT:
        for child in reversed(list(tag.contents)):
            tag.insert_after(child.extract())


def replace_marker(marker: Tag, replacement: Tag) -> None:
    """Put the TOC container where the marker was."""
    _release_children(marker)
    marker.replace_with(replacement)


def remove_markers(markers: list[Tag]) -> int:
    """Remove marker elements from the tree and return how many were removed."""
    for tag in markers:
        _release_children(tag)
        tag.decompose()
    if markers:
        logger.debug("Removed %d TOC marker(s)", len(markers))
    return len(markers)
