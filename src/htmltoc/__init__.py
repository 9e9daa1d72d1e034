"""htmltoc - table of contents generation for rendered HTML pages.

htmltoc scans a rendered page for ``h1``-``h6`` headings, gives every listed
heading a stable id, builds a nested list mirroring the heading hierarchy
and injects it where the page holds a ``[toc]`` placeholder paragraph (or a
``<toc>`` element).

Key Features
------------
- Level-range filtering, scope container and ``not-in-toc`` exclusion
- Deterministic, collision-free slug ids that never overwrite existing ids
- Ordered or unordered lists with style classes
- Optional heading block with a show/hide toggle control
- Layered configuration: site config, page metadata, marker attributes
- Jinja2 template context exposing the TOC as pre-rendered markup

Requirements
------------
- Python 3.10+
- beautifulsoup4, Jinja2, PyYAML

Examples
--------
Inject the TOC at the marker:

    >>> from htmltoc import inject_toc
    >>> html = "<p>[toc]</p><h1>Intro</h1><h2>Setup</h2><h2>Usage</h2>"
    >>> result = inject_toc(html)
    >>> print(result.content)  # doctest: +SKIP

Resolve options from site configuration and page metadata:

    >>> from htmltoc import process_page
    >>> result = process_page(
    ...     html,
    ...     site_config={"toc": {"max_level": 3, "heading": "Contents"}},
    ...     page_meta={"toc_heading": "On this page"},
    ... )

"""

from htmltoc.api import TocResult, generate_toc, inject_toc, process_page
from htmltoc.config import load_config_file, resolve_options
from htmltoc.dom.headers import HeadingNode
from htmltoc.exceptions import (
    ConfigurationError,
    DependencyError,
    HtmlTocError,
    MalformedInputError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from htmltoc.options import TocOptions
from htmltoc.toc.tree import TocItem, TocList
from htmltoc.utils.text import slugify

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "ConfigurationError",
    "DependencyError",
    "HeadingNode",
    "HtmlTocError",
    "MalformedInputError",
    "ParsingError",
    "RenderingError",
    "TocItem",
    "TocList",
    "TocOptions",
    "TocResult",
    "ValidationError",
    "generate_toc",
    "inject_toc",
    "load_config_file",
    "process_page",
    "resolve_options",
    "slugify",
]
