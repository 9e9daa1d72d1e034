#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/dom/soup.py
"""Parsing and serialization of HTML content.

Content arrives as the rendered HTML of a page body, usually a fragment
without ``<html>``/``<body>`` wrappers. Parsers that add the wrappers
(``lxml``, ``html5lib``) get them stripped again on serialization so the
output has the same shape as the input.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup
from bs4.element import Tag

from htmltoc.exceptions import DependencyError, MalformedInputError

logger = logging.getLogger(__name__)

_DOCUMENT_PATTERN = re.compile(r"<\s*(!doctype|html|body)\b", re.IGNORECASE)

_PARSER_PACKAGES = {
    "lxml": "lxml",
    "html5lib": "html5lib",
}


def is_full_document(content: str) -> bool:
    """Check whether content is a complete document rather than a fragment."""
    return _DOCUMENT_PATTERN.search(content) is not None


def parse_html(content: str, parser: str = "html.parser") -> BeautifulSoup:
    """Parse HTML content into a mutable BeautifulSoup tree.

    Parameters
    ----------
    content : str
        HTML content (fragment or full document)
    parser : str, default "html.parser"
        BeautifulSoup tree builder name

    Returns
    -------
    BeautifulSoup
        Parsed tree

    Raises
    ------
    DependencyError
        If the requested parser backend is not installed
    MalformedInputError
        If the parser rejects the markup

    """
    try:
        return BeautifulSoup(content, parser)
    except FeatureNotFound as e:
        package = _PARSER_PACKAGES.get(parser, parser)
        raise DependencyError(
            f"HTML parser '{parser}' is not available",
            package_name=package,
            install_hint=f"pip install {package}",
            original_error=e,
        ) from e
    except ParserRejectedMarkup as e:
        raise MalformedInputError(f"Could not parse HTML content: {e}", original_error=e) from e


def serialize_html(soup: BeautifulSoup, *, fragment: bool) -> str:
    """Serialize a parsed tree back to markup.

    Parameters
    ----------
    soup : BeautifulSoup
        Parsed tree
    fragment : bool
        Whether the original input was a fragment; wrappers added by the
        parser are dropped in that case

    Returns
    -------
    str
        Serialized HTML

    """
    if fragment and soup.body is not None:
        return soup.body.decode_contents()
    return str(soup)


def collect_existing_ids(soup: BeautifulSoup) -> set[str]:
    """Return every element id already present in the tree."""
    ids: set[str] = set()
    for tag in soup.find_all(id=True):
        value = tag.get("id")
        if isinstance(value, str) and value:
            ids.add(value)
    return ids


def class_tokens(tag: Tag) -> frozenset[str]:
    """Return the class tokens of a tag.

    Parsed tags hold ``class`` as a list, tags built in code may hold a
    space-separated string; both are split into tokens.
    """
    value = tag.get("class")
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset(value.split())
    return frozenset(token for item in value for token in str(item).split())
