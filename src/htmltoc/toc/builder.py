#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/toc/builder.py
"""Nested TOC construction from a flat heading sequence.

Headings arrive as a flat list in document order, each tagged with its
level. ``build_toc_list`` turns that list into nested ``TocList`` objects by
comparing adjacent levels:

- a deeper next heading opens a sublist under the current entry
- an equal next heading is a sibling
- a next heading shallower than the level that opened the current list
  closes it and hands control back to the caller

Level jumps (``h2`` followed by ``h4``) nest one list per transition. A
heading shallower than its predecessor but deeper than the enclosing entry
(``h2``, ``h4``, ``h3``) is nested under that enclosing entry, after the
deeper one. The first heading's level sets the top of the tree.

The functions are pure: the cursor is passed in and the advanced cursor is
returned, nothing in the input is modified.
"""

from __future__ import annotations

from typing import Sequence

from htmltoc.constants import TOC_HIDE_CLASS, TOC_SHOW_CLASS
from htmltoc.dom.headers import HeadingNode
from htmltoc.options import TocOptions
from htmltoc.toc.tree import TocItem, TocList


def _state_class(options: TocOptions) -> str | None:
    if not options.toggle:
        return None
    return TOC_HIDE_CLASS if options.initially_hide else TOC_SHOW_CLASS


def _make_list(items: list[TocItem], options: TocOptions, depth: int) -> TocList:
    return TocList(
        items=tuple(items),
        ordered=options.ordered,
        style=options.style,
        state_class=_state_class(options) if depth == 0 else None,
    )


def _make_item(header: HeadingNode, children: list[TocItem], options: TocOptions, depth: int) -> TocItem:
    if not header.id:
        raise ValueError(f"Heading {header.text!r} at position {header.position} has no id; assign ids first")
    return TocItem(
        anchor=header.anchor,
        label=header.text,
        level=header.level,
        children=_make_list(children, options, depth + 1) if children else None,
    )


def build_toc_list(
    headers: Sequence[HeadingNode], cursor: int, options: TocOptions, depth: int = 0
) -> tuple[TocList, int]:
    """Build the list of entries starting at ``cursor``.

    Parameters
    ----------
    headers : sequence of HeadingNode
        Headings in document order, every one with an id
    cursor : int
        Index of the first heading of this list
    options : TocOptions
        Resolved options (list type, style, toggle state)
    depth : int, default 0
        Nesting depth; the top-level list never returns early

    Returns
    -------
    tuple of (TocList, int)
        The list and the index of the first heading it did not consume

    Raises
    ------
    ValueError
        If a heading has no id

    """
    items: list[TocItem] = []
    total = len(headers)
    if cursor >= total:
        return _make_list(items, options, depth), cursor

    opening_level = headers[cursor].level

    while cursor < total:
        header = headers[cursor]
        cursor += 1

        children: list[TocItem] = []
        while cursor < total and headers[cursor].level > header.level:
            sublist, cursor = build_toc_list(headers, cursor, options, depth + 1)
            children.extend(sublist.items)

        items.append(_make_item(header, children, options, depth))

        if depth > 0 and cursor < total and headers[cursor].level < opening_level:
            break

    return _make_list(items, options, depth), cursor


def build_toc_tree(headers: Sequence[HeadingNode], options: TocOptions) -> TocList | None:
    """Build the complete TOC tree for a heading sequence.

    Parameters
    ----------
    headers : sequence of HeadingNode
        Headings in document order, every one with an id
    options : TocOptions
        Resolved options

    Returns
    -------
    TocList or None
        Top-level list, or None when there are no headings

    """
    if not headers:
        return None
    tree, cursor = build_toc_list(headers, 0, options)
    if cursor != len(headers):
        raise RuntimeError(f"TOC builder stopped at heading {cursor} of {len(headers)}")
    return tree
