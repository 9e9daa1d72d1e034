#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/dom/headers.py
"""Heading collection.

Scans a parsed tree for ``h1``-``h6`` elements and returns the qualifying
headings as a flat, document-ordered sequence of ``HeadingNode``.

Exclusion policy
----------------
A heading carrying the configured exclude class (``not-in-toc`` by default)
is dropped here and is invisible to every later stage: it receives no id, it
is not listed, it does not count toward ``min_headers`` and it cannot anchor
nested entries. Headings inside an already rendered TOC container are
skipped the same way.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from htmltoc.constants import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL, TOC_CONTAINER_ID
from htmltoc.dom.soup import class_tokens
from htmltoc.options import TocOptions
from htmltoc.utils.text import collapse_whitespace

logger = logging.getLogger(__name__)

_HEADING_TAG = re.compile(r"^h([1-6])$")


@dataclass(frozen=True)
class HeadingNode:
    """A heading element found in the document.

    Parameters
    ----------
    level : int
        Heading level (1-6), derived from the tag name
    text : str
        Rendered text content with whitespace collapsed
    id : str or None
        Element id, None when the heading has none yet
    css_classes : frozenset of str
        Class tokens of the element
    position : int
        Index in document order among the collected headings
    tag : Tag or None
        The element in the parsed tree; None for headings built in code

    """

    level: int
    text: str
    id: Optional[str] = None
    css_classes: frozenset[str] = field(default_factory=frozenset)
    position: int = 0
    tag: Optional[Tag] = field(default=None, compare=False, repr=False)

    @property
    def anchor(self) -> str:
        """Fragment link target (``#id``)."""
        return f"#{self.id}" if self.id else ""

    @classmethod
    def from_tag(cls, tag: Tag, position: int) -> HeadingNode:
        """Build a node from a heading element."""
        match = _HEADING_TAG.match(tag.name or "")
        if match is None:
            raise ValueError(f"Not a heading element: <{tag.name}>")
        raw_id = tag.get("id")
        heading_id = raw_id if isinstance(raw_id, str) and raw_id.strip() else None
        return cls(
            level=int(match.group(1)),
            text=collapse_whitespace(tag.get_text()),
            id=heading_id,
            css_classes=class_tokens(tag),
            position=position,
            tag=tag,
        )


def heading_tag_names(min_level: int = MIN_HEADING_LEVEL, max_level: int = MAX_HEADING_LEVEL) -> list[str]:
    """Return the tag names for the levels in ``[min_level, max_level]``."""
    low = max(min_level, MIN_HEADING_LEVEL)
    high = min(max_level, MAX_HEADING_LEVEL)
    return [f"h{level}" for level in range(low, high + 1)]


def _inside_rendered_toc(tag: Tag) -> bool:
    return tag.find_parent(attrs={"id": TOC_CONTAINER_ID}) is not None


def collect_headers(soup: BeautifulSoup, options: TocOptions) -> list[HeadingNode]:
    """Collect the headings that qualify for the table of contents.

    Parameters
    ----------
    soup : BeautifulSoup
        Parsed document
    options : TocOptions
        Resolved options (level range, scope container, exclude class)

    Returns
    -------
    list of HeadingNode
        Qualifying headings in document order; empty when the level range is
        inverted or the scope container does not exist

    """
    if not options.has_level_range:
        logger.debug("Empty heading range: min_level=%d > max_level=%d", options.min_level, options.max_level)
        return []

    scope: Tag | BeautifulSoup = soup
    if options.container:
        container = soup.find(attrs={"id": options.container})
        if not isinstance(container, Tag):
            logger.warning("TOC container element '#%s' not found; no headings collected", options.container)
            return []
        scope = container

    headers: list[HeadingNode] = []
    for tag in scope.find_all(heading_tag_names(options.min_level, options.max_level)):
        if options.exclude_class in class_tokens(tag):
            logger.debug("Skipping excluded heading <%s>: %r", tag.name, tag.get_text()[:60])
            continue
        if _inside_rendered_toc(tag):
            continue
        headers.append(HeadingNode.from_tag(tag, position=len(headers)))

    logger.debug("Collected %d heading(s) in levels %d-%d", len(headers), options.min_level, options.max_level)
    return headers
