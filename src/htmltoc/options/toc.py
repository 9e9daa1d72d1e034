#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/options/toc.py
"""Configuration options for table of contents generation.

This module defines ``TocOptions``, the immutable set of options resolved
once per render from global configuration and page-level overrides.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from htmltoc.constants import (
    DEFAULT_HTML_PARSER,
    DEFAULT_TOC_CONTAINER,
    DEFAULT_TOC_EXCLUDE_CLASS,
    DEFAULT_TOC_HEADING,
    DEFAULT_TOC_HIDE_TEXT,
    DEFAULT_TOC_INITIALLY_HIDE,
    DEFAULT_TOC_MARKER,
    DEFAULT_TOC_MAX_LEVEL,
    DEFAULT_TOC_MIN_HEADERS,
    DEFAULT_TOC_MIN_LEVEL,
    DEFAULT_TOC_SHOW_TEXT,
    DEFAULT_TOC_STYLE,
    DEFAULT_TOC_TAG,
    DEFAULT_TOC_TOGGLE,
    HTML_PARSERS,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    TOC_STYLES,
    TOC_TAGS,
    HtmlParser,
    TocStyle,
    TocTag,
)
from htmltoc.exceptions import ConfigurationError
from htmltoc.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class TocOptions(CloneFrozenMixin):
    """Configuration options for building and injecting a table of contents.

    Parameters
    ----------
    min_headers : int, default 2
        Minimum number of qualifying headings required to render a TOC.
    min_level : int, default 1
        Shallowest heading level included (1-6).
    max_level : int, default 5
        Deepest heading level included (1-6). When ``min_level`` is greater
        than ``max_level`` nothing is rendered.
    tag : {"ordered", "unordered"}, default "ordered"
        List element used for the TOC (``<ol>`` or ``<ul>``).
    style : {"numbers", "bullets", "none", "default"}, default "default"
        List style, emitted as a ``toc-<style>`` class on every list.
    heading : str or None, default None
        Text of the heading block shown above the list.
    container : str or None, default None
        Id of the element whose descendants are scanned for headings.
        When None the whole document is scanned.
    toggle : bool, default False
        Add a show/hide control to the heading block.
    initially_hide : bool, default False
        Start with the list hidden (only meaningful with ``toggle``).
    hide_text : str, default "hide"
        Label of the toggle control while the list is shown.
    show_text : str, default "show"
        Label of the toggle control while the list is hidden.
    marker : str, default "[toc]"
        Text of the placeholder paragraph replaced by the TOC.
    exclude_class : str, default "not-in-toc"
        Headings carrying this class are ignored entirely.
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup parser backend.

    Raises
    ------
    ConfigurationError
        If an enumerated option has a value outside its allowed set, or a
        numeric option is out of range.

    """

    min_headers: int = field(
        default=DEFAULT_TOC_MIN_HEADERS,
        metadata={"help": "Minimum number of headings required to render a TOC", "type": int, "importance": "core"},
    )
    min_level: int = field(
        default=DEFAULT_TOC_MIN_LEVEL,
        metadata={"help": "Shallowest heading level included (1-6)", "type": int, "importance": "core"},
    )
    max_level: int = field(
        default=DEFAULT_TOC_MAX_LEVEL,
        metadata={"help": "Deepest heading level included (1-6)", "type": int, "importance": "core"},
    )
    tag: TocTag = field(
        default=DEFAULT_TOC_TAG,
        metadata={"help": "List element used for the TOC", "type": str, "choices": TOC_TAGS, "importance": "core"},
    )
    style: TocStyle = field(
        default=DEFAULT_TOC_STYLE,
        metadata={"help": "List style class", "type": str, "choices": TOC_STYLES, "importance": "core"},
    )
    heading: str | None = field(
        default=DEFAULT_TOC_HEADING,
        metadata={"help": "Heading text shown above the list", "type": str, "nullable": True, "importance": "core"},
    )
    container: str | None = field(
        default=DEFAULT_TOC_CONTAINER,
        metadata={
            "help": "Id of the element whose headings are listed (default: whole document)",
            "type": str,
            "nullable": True,
            "importance": "advanced",
        },
    )
    toggle: bool = field(
        default=DEFAULT_TOC_TOGGLE,
        metadata={"help": "Add a show/hide control to the TOC heading", "type": bool, "importance": "core"},
    )
    initially_hide: bool = field(
        default=DEFAULT_TOC_INITIALLY_HIDE,
        metadata={"help": "Start with the TOC list hidden", "type": bool, "importance": "core"},
    )
    hide_text: str = field(
        default=DEFAULT_TOC_HIDE_TEXT,
        metadata={"help": "Toggle label while the list is shown", "type": str, "importance": "advanced"},
    )
    show_text: str = field(
        default=DEFAULT_TOC_SHOW_TEXT,
        metadata={"help": "Toggle label while the list is hidden", "type": str, "importance": "advanced"},
    )
    marker: str = field(
        default=DEFAULT_TOC_MARKER,
        metadata={"help": "Text of the placeholder paragraph replaced by the TOC", "type": str, "importance": "advanced"},
    )
    exclude_class: str = field(
        default=DEFAULT_TOC_EXCLUDE_CLASS,
        metadata={"help": "CSS class that removes a heading from the TOC", "type": str, "importance": "advanced"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "BeautifulSoup parser backend",
            "type": str,
            "choices": HTML_PARSERS,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate enumerated values and numeric ranges.

        Raises
        ------
        ConfigurationError
            If any field value is outside its valid range.

        """
        if self.tag not in TOC_TAGS:
            raise ConfigurationError.invalid_choice("tag", self.tag, TOC_TAGS)
        if self.style not in TOC_STYLES:
            raise ConfigurationError.invalid_choice("style", self.style, TOC_STYLES)
        if self.html_parser not in HTML_PARSERS:
            raise ConfigurationError.invalid_choice("html_parser", self.html_parser, HTML_PARSERS)

        if self.min_headers < 0:
            raise ConfigurationError(
                f"min_headers must be non-negative, got {self.min_headers}",
                parameter_name="min_headers",
                parameter_value=self.min_headers,
            )
        for name in ("min_level", "max_level"):
            value = getattr(self, name)
            if not MIN_HEADING_LEVEL <= value <= MAX_HEADING_LEVEL:
                raise ConfigurationError(
                    f"{name} must be {MIN_HEADING_LEVEL}-{MAX_HEADING_LEVEL}, got {value}",
                    parameter_name=name,
                    parameter_value=value,
                )

        if not self.marker.strip():
            raise ConfigurationError("marker must not be empty", parameter_name="marker", parameter_value=self.marker)

    @property
    def ordered(self) -> bool:
        """Whether the TOC uses an ordered list."""
        return self.tag == "ordered"

    @property
    def has_level_range(self) -> bool:
        """Whether ``min_level``..``max_level`` selects at least one level."""
        return self.min_level <= self.max_level

    def includes_level(self, level: int) -> bool:
        """Check whether a heading level falls inside the configured range."""
        return self.min_level <= level <= self.max_level
