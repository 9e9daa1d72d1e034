"""Test utilities for htmltoc test suite.

This module provides helpers for building heading sequences and pages and
for inspecting generated TOC trees and markup.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Sequence

from bs4 import BeautifulSoup

from htmltoc.dom.headers import HeadingNode
from htmltoc.toc.tree import TocList


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def make_headers(levels: Sequence[int], prefix: str = "h") -> list[HeadingNode]:
    """Build id-bearing heading nodes for the given levels (ids ``h0``, ``h1``, ...)."""
    return [
        HeadingNode(level=level, text=f"Heading {i}", id=f"{prefix}{i}", position=i)
        for i, level in enumerate(levels)
    ]


def make_page(levels: Sequence[int], marker: bool = True) -> str:
    """Build a page fragment with one heading per level (texts ``Heading 0``, ...)."""
    parts = ["<p>[toc]</p>"] if marker else []
    for i, level in enumerate(levels):
        parts.append(f"<h{level}>Heading {i}</h{level}>")
        parts.append(f"<p>Body {i}</p>")
    return "\n".join(parts)


def shape(toc_list: TocList | None) -> list:
    """Reduce a TOC tree to nested ``(label, children)`` tuples for comparisons."""
    if toc_list is None:
        return []
    return [(item.label, shape(item.children)) for item in toc_list.items]


def anchors_in_order(toc_list: TocList) -> list[str]:
    """Return every anchor of a tree in depth-first document order."""
    return [item.anchor for _, item in toc_list.walk()]


def soup_of(html: str) -> BeautifulSoup:
    """Parse HTML with the default parser."""
    return BeautifulSoup(html, "html.parser")
