#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the htmltoc library.

This module centralizes the hardcoded values used across htmltoc: the
Literal types accepted by the options, the default option values, and the
element ids and CSS class names written into the generated markup.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. TOC Defaults - Default values for TocOptions fields
3. Markup - Ids, tag names and CSS classes of the generated container
4. Configuration Files - Names used for config discovery
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

TocTag = Literal["ordered", "unordered"]
TocStyle = Literal["numbers", "bullets", "none", "default"]
HtmlParser = Literal["html.parser", "html5lib", "lxml"]

TOC_TAGS: tuple[str, ...] = ("ordered", "unordered")
TOC_STYLES: tuple[str, ...] = ("numbers", "bullets", "none", "default")
HTML_PARSERS: tuple[str, ...] = ("html.parser", "html5lib", "lxml")

# =============================================================================
# TOC Defaults
# =============================================================================

DEFAULT_TOC_MIN_HEADERS = 2
DEFAULT_TOC_MIN_LEVEL = 1
DEFAULT_TOC_MAX_LEVEL = 5
DEFAULT_TOC_TAG: TocTag = "ordered"
DEFAULT_TOC_STYLE: TocStyle = "default"
DEFAULT_TOC_HEADING: str | None = None
DEFAULT_TOC_CONTAINER: str | None = None
DEFAULT_TOC_TOGGLE = False
DEFAULT_TOC_INITIALLY_HIDE = False
DEFAULT_TOC_HIDE_TEXT = "hide"
DEFAULT_TOC_SHOW_TEXT = "show"
DEFAULT_TOC_MARKER = "[toc]"
DEFAULT_TOC_EXCLUDE_CLASS = "not-in-toc"
DEFAULT_HTML_PARSER: HtmlParser = "html.parser"

# Valid heading levels (h1-h6)
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

# Slug used when heading text has no usable characters
EMPTY_SLUG_FALLBACK = "n-a"

# =============================================================================
# Markup
# =============================================================================

TOC_CONTAINER_ID = "toc"
TOC_TOGGLE_ID = "toc-toggle"
TOC_MARKER_ELEMENT = "toc"

TOC_HEADING_CLASS = "toc-heading"
TOC_LIST_CLASS = "toc"
TOC_ITEM_CLASS_PREFIX = "toc-h"
TOC_STYLE_CLASS_PREFIX = "toc-"
TOC_HIDE_CLASS = "toc-hide"
TOC_SHOW_CLASS = "toc-show"

# Attributes of a <toc> marker element that override options for one render
MARKER_ATTRIBUTE_OVERRIDES: tuple[str, ...] = ("heading", "min-level", "max-level", "min-headers")

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_ENV_VAR = "HTMLTOC_CONFIG"
CONFIG_FILENAMES: tuple[str, ...] = (".htmltoc.toml", ".htmltoc.yaml", ".htmltoc.yml", ".htmltoc.json")
PYPROJECT_TOOL_SECTION = "htmltoc"

# Site config keys: nested table name and flat key prefix (e.g. ``toc_max_level``)
SITE_CONFIG_SECTION = "toc"
SITE_CONFIG_PREFIX = "toc_"
