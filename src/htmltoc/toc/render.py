#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/toc/render.py
"""Rendering of TOC trees into HTML elements.

The container has this shape::

    <div id="toc">
      <div class="toc-heading">Contents
        <button type="button" id="toc-toggle" data-show-text="show"
                data-hide-text="hide">hide</button>
      </div>
      <ol class="toc toc-default toc-show">
        <li class="toc-h2"><a href="#intro">Intro</a>
          <ol class="toc toc-default">...</ol>
        </li>
      </ol>
    </div>

The heading block only appears when a heading text or the toggle is
configured; the state class only appears on the top-level list when the
toggle is on.
"""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag

from htmltoc.constants import (
    TOC_CONTAINER_ID,
    TOC_HEADING_CLASS,
    TOC_ITEM_CLASS_PREFIX,
    TOC_LIST_CLASS,
    TOC_STYLE_CLASS_PREFIX,
    TOC_TOGGLE_ID,
)
from htmltoc.options import TocOptions
from htmltoc.toc.tree import TocList


def _list_classes(toc_list: TocList) -> str:
    classes = [TOC_LIST_CLASS, f"{TOC_STYLE_CLASS_PREFIX}{toc_list.style}"]
    if toc_list.state_class:
        classes.append(toc_list.state_class)
    return " ".join(classes)


def render_toc_list(toc_list: TocList, soup: BeautifulSoup) -> Tag:
    """Render a TOC list (and its sublists) as an ``<ol>``/``<ul>`` element.

    Parameters
    ----------
    toc_list : TocList
        List to render
    soup : BeautifulSoup
        Tree that will own the new elements

    Returns
    -------
    Tag
        The list element

    """
    list_tag = soup.new_tag("ol" if toc_list.ordered else "ul", attrs={"class": _list_classes(toc_list)})
    for item in toc_list.items:
        li = soup.new_tag("li", attrs={"class": f"{TOC_ITEM_CLASS_PREFIX}{item.level}"})
        link = soup.new_tag("a", attrs={"href": item.anchor})
        link.string = item.label
        li.append(link)
        if item.children:
            li.append(render_toc_list(item.children, soup))
        list_tag.append(li)
    return list_tag


def render_toc_heading(options: TocOptions, soup: BeautifulSoup) -> Tag | None:
    """Render the heading block with optional toggle control.

    Returns None when neither a heading nor a toggle is configured.
    """
    if options.heading is None and not options.toggle:
        return None

    heading = soup.new_tag("div", attrs={"class": TOC_HEADING_CLASS})
    if options.heading is not None:
        heading.append(options.heading)

    if options.toggle:
        toggle = soup.new_tag(
            "button",
            attrs={
                "type": "button",
                "id": TOC_TOGGLE_ID,
                "data-show-text": options.show_text,
                "data-hide-text": options.hide_text,
            },
        )
        toggle.string = options.show_text if options.initially_hide else options.hide_text
        if options.heading is not None:
            heading.append(" ")
        heading.append(toggle)

    return heading


def render_toc_container(tree: TocList, options: TocOptions, soup: BeautifulSoup) -> Tag:
    """Wrap the rendered list in the ``<div id="toc">`` container.

    Parameters
    ----------
    tree : TocList
        Top-level TOC list
    options : TocOptions
        Resolved options (heading, toggle texts)
    soup : BeautifulSoup
        Tree that will own the new elements

    Returns
    -------
    Tag
        The container element, not yet attached to the tree

    """
    container = soup.new_tag("div", attrs={"id": TOC_CONTAINER_ID})
    heading = render_toc_heading(options, soup)
    if heading is not None:
        container.append(heading)
    container.append(render_toc_list(tree, soup))
    return container


def render_toc_html(tree: TocList, options: TocOptions) -> str:
    """Render the container to a markup string without a host document."""
    soup = BeautifulSoup("", "html.parser")
    return str(render_toc_container(tree, options, soup))
