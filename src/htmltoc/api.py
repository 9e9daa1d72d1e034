#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/api.py
"""Public entry points for table of contents generation.

``inject_toc`` runs the whole transformation on one page of rendered HTML:

1. parse the content
2. find the placeholder markers
3. collect the qualifying headings
4. plan and apply heading ids
5. build the nested TOC tree
6. render the container and put it in place of the first marker
7. serialize the tree

Every "nothing to do" case degrades to returning the content unchanged, so
a page never fails to render because of its table of contents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from htmltoc.config import extract_toc_settings, resolve_options
from htmltoc.dom.headers import HeadingNode, collect_headers
from htmltoc.dom.ids import apply_heading_ids, plan_heading_ids
from htmltoc.dom.markers import find_markers, marker_overrides, remove_markers, replace_marker
from htmltoc.dom.soup import collect_existing_ids, is_full_document, parse_html, serialize_html
from htmltoc.exceptions import ConfigurationError, MalformedInputError
from htmltoc.options import TocOptions
from htmltoc.toc.builder import build_toc_tree
from htmltoc.toc.render import render_toc_container
from htmltoc.toc.tree import TocList

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TocResult:
    """Outcome of a TOC transformation.

    Parameters
    ----------
    content : str
        The transformed HTML (the input unchanged when nothing was done)
    toc_html : str, default ""
        Markup of the TOC container, empty when no TOC was built
    tree : TocList or None, default None
        The built TOC tree
    headers : tuple of HeadingNode, default ()
        Listed headings with their final ids
    injected : bool, default False
        Whether a marker was replaced by the TOC
    options : TocOptions or None, default None
        The options in effect (including marker attribute overrides)

    """

    content: str
    toc_html: str = ""
    tree: Optional[TocList] = None
    headers: tuple[HeadingNode, ...] = field(default_factory=tuple)
    injected: bool = False
    options: Optional[TocOptions] = None

    @property
    def has_toc(self) -> bool:
        """Whether a TOC was built."""
        return self.tree is not None


def _apply_marker_overrides(options: TocOptions, overrides: dict[str, Any]) -> TocOptions:
    if not overrides:
        return options
    try:
        return resolve_options(overrides, base=options)
    except ConfigurationError as e:
        logger.warning("Ignoring invalid <toc> marker attributes %s: %s", overrides, e.message)
        return options


def inject_toc(content: str, options: Optional[TocOptions] = None) -> TocResult:
    """Build a table of contents for a page and inject it at its marker.

    Parameters
    ----------
    content : str
        Rendered HTML of the page (fragment or full document)
    options : TocOptions, optional
        Resolved options; defaults apply when omitted

    Returns
    -------
    TocResult
        Transformed content, TOC markup and tree. When the TOC cannot be
        built (empty content, unparseable markup, inverted level range, fewer
        headings than ``min_headers``) the content is returned unchanged,
        except that placeholder markers are removed.

    Raises
    ------
    DependencyError
        If the configured parser backend is not installed

    Examples
    --------
    >>> html = "<p>[toc]</p><h1>One</h1><h2>Two</h2>"
    >>> result = inject_toc(html)
    >>> result.injected
    True

    """
    options = options or TocOptions()

    if not content or not content.strip():
        logger.debug("Empty content; skipping TOC")
        return TocResult(content=content, options=options)

    try:
        soup = parse_html(content, options.html_parser)
    except MalformedInputError as e:
        logger.warning("Skipping TOC generation: %s", e.message)
        return TocResult(content=content, options=options)

    fragment = not is_full_document(content)
    markers = find_markers(soup, options.marker)
    if markers:
        options = _apply_marker_overrides(options, marker_overrides(markers[0]))

    headers = collect_headers(soup, options)
    if not headers or len(headers) < options.min_headers:
        logger.debug("Found %d heading(s), %d required; skipping TOC", len(headers), options.min_headers)
        if not markers:
            return TocResult(content=content, options=options)
        remove_markers(markers)
        return TocResult(content=serialize_html(soup, fragment=fragment), options=options)

    plan = plan_heading_ids(headers, collect_existing_ids(soup))
    headers = apply_heading_ids(headers, plan)

    tree = build_toc_tree(headers, options)
    if tree is None:
        logger.debug("No TOC tree built from %d heading(s)", len(headers))
        if not plan and not markers:
            return TocResult(content=content, options=options)
        remove_markers(markers)
        return TocResult(content=serialize_html(soup, fragment=fragment), options=options)
    container = render_toc_container(tree, options, soup)
    toc_html = str(container)

    if markers:
        replace_marker(markers[0], container)
        if len(markers) > 1:
            logger.warning("Found %d TOC markers; only the first one receives the TOC", len(markers))
            remove_markers(markers[1:])

    if plan or markers:
        output = serialize_html(soup, fragment=fragment)
    else:
        output = content

    logger.debug("Built TOC with %d entries (injected=%s)", tree.count(), bool(markers))
    return TocResult(
        content=output,
        toc_html=toc_html,
        tree=tree,
        headers=tuple(headers),
        injected=bool(markers),
        options=options,
    )


def generate_toc(content: str, options: Optional[TocOptions] = None) -> str:
    """Return only the TOC container markup for a page ("" when none)."""
    return inject_toc(content, options).toc_html


def process_page(
    content: str,
    site_config: Optional[Mapping[str, Any]] = None,
    page_meta: Optional[Mapping[str, Any]] = None,
    **overrides: Any,
) -> TocResult:
    """Resolve layered options for a page and inject its TOC.

    Parameters
    ----------
    content : str
        Rendered HTML of the page
    site_config : Mapping, optional
        Site-wide configuration; TOC settings are read from its ``toc`` table
        or ``toc_*`` keys, other keys are ignored
    page_meta : Mapping, optional
        Page metadata (front matter); read like ``site_config`` and taking
        precedence over it key by key
    **overrides : Any
        Option values taking precedence over both

    Returns
    -------
    TocResult
        Result of ``inject_toc`` with the resolved options

    Raises
    ------
    ConfigurationError
        If the resolved configuration is invalid; raised before the content
        is parsed

    """
    options = resolve_options(
        extract_toc_settings(site_config, bare=False),
        extract_toc_settings(page_meta, bare=False),
        overrides,
    )
    return inject_toc(content, options)
