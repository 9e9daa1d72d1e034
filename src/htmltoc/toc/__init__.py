#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Table of contents tree, builder and renderer."""

from htmltoc.toc.builder import build_toc_list, build_toc_tree
from htmltoc.toc.render import render_toc_container, render_toc_heading, render_toc_html, render_toc_list
from htmltoc.toc.tree import TocItem, TocList

__all__ = [
    "TocItem",
    "TocList",
    "build_toc_list",
    "build_toc_tree",
    "render_toc_container",
    "render_toc_heading",
    "render_toc_html",
    "render_toc_list",
]
