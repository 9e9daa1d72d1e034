#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document tree helpers: parsing, heading collection, ids and markers."""

from htmltoc.dom.headers import HeadingNode, collect_headers, heading_tag_names
from htmltoc.dom.ids import apply_heading_ids, plan_heading_ids
from htmltoc.dom.markers import find_markers, marker_overrides, remove_markers, replace_marker
from htmltoc.dom.soup import collect_existing_ids, is_full_document, parse_html, serialize_html

__all__ = [
    "HeadingNode",
    "apply_heading_ids",
    "collect_existing_ids",
    "collect_headers",
    "find_markers",
    "heading_tag_names",
    "is_full_document",
    "marker_overrides",
    "parse_html",
    "plan_heading_ids",
    "remove_markers",
    "replace_marker",
    "serialize_html",
]
