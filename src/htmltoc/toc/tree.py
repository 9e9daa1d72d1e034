#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/toc/tree.py
"""Table of contents tree nodes.

A ``TocList`` holds ``TocItem`` entries; an item may carry a nested
``TocList``. Trees are built once per render and never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(frozen=True)
class TocItem:
    """One entry of the table of contents.

    Parameters
    ----------
    anchor : str
        Link target (``#id``)
    label : str
        Link text (the heading text)
    level : int
        Level of the source heading
    children : TocList or None, default None
        Nested entries for deeper headings that follow this one

    """

    anchor: str
    label: str
    level: int
    children: Optional[TocList] = None


@dataclass(frozen=True)
class TocList:
    """An ordered or unordered list of TOC entries.

    Parameters
    ----------
    items : tuple of TocItem
        Entries in document order
    ordered : bool, default True
        Render as ``<ol>`` (True) or ``<ul>`` (False)
    style : str, default "default"
        List style name, rendered as a ``toc-<style>`` class
    state_class : str or None, default None
        Show/hide state class; only set on the top-level list

    """

    items: tuple[TocItem, ...] = field(default_factory=tuple)
    ordered: bool = True
    style: str = "default"
    state_class: Optional[str] = None

    def __len__(self) -> int:
        """Return the number of direct entries."""
        return len(self.items)

    def __bool__(self) -> bool:
        """Return True when the list has entries."""
        return bool(self.items)

    def walk(self) -> Iterator[tuple[int, TocItem]]:
        """Yield ``(depth, item)`` pairs depth-first in document order."""
        for item in self.items:
            yield 0, item
            if item.children:
                for depth, child in item.children.walk():
                    yield depth + 1, child

    def count(self) -> int:
        """Return the total number of entries at every depth."""
        return sum(1 for _ in self.walk())

    def depth(self) -> int:
        """Return the nesting depth (1 for a flat list, 0 when empty)."""
        if not self.items:
            return 0
        return 1 + max((item.children.depth() if item.children else 0) for item in self.items)

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation of the tree."""
        return {
            "ordered": self.ordered,
            "style": self.style,
            "state_class": self.state_class,
            "items": [
                {
                    "anchor": item.anchor,
                    "label": item.label,
                    "level": item.level,
                    "children": item.children.to_dict() if item.children else None,
                }
                for item in self.items
            ],
        }
