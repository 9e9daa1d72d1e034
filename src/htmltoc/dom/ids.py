#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/dom/ids.py
"""Heading id assignment.

Assignment runs in two phases: ``plan_heading_ids`` computes the ids for
headings that lack one without touching the tree, then
``apply_heading_ids`` writes them to the elements. Headings that already
have an id keep it.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Sequence

from htmltoc.constants import TOC_CONTAINER_ID, TOC_TOGGLE_ID
from htmltoc.dom.headers import HeadingNode
from htmltoc.utils.text import slugify, unique_slug

logger = logging.getLogger(__name__)

# Ids owned by the generated container; headings must not reuse them
RESERVED_IDS = frozenset({TOC_CONTAINER_ID, TOC_TOGGLE_ID})


def plan_heading_ids(headers: Sequence[HeadingNode], existing_ids: Iterable[str] = ()) -> dict[int, str]:
    """Compute ids for the headings that have none.

    Parameters
    ----------
    headers : sequence of HeadingNode
        Collected headings in document order
    existing_ids : iterable of str
        Ids already used anywhere in the document

    Returns
    -------
    dict of int to str
        Maps a heading's ``position`` to its new id. Headings with an id are
        absent from the mapping.

    Notes
    -----
    The result depends only on the heading texts, their order and the
    existing ids, so the same document always gets the same ids. Colliding
    slugs get ``-2``, ``-3``, ... suffixes in document order.

    An explicit heading id equal to a reserved id is kept and logged as a
    warning.

    """
    taken: set[str] = set(existing_ids) | set(RESERVED_IDS)
    taken.update(header.id for header in headers if header.id)

    plan: dict[int, str] = {}
    for header in headers:
        if header.id in RESERVED_IDS:
            logger.warning("Heading id %r is also used by the TOC markup; links to it may be ambiguous", header.id)
        if header.id:
            continue
        plan[header.position] = unique_slug(slugify(header.text), taken)
    return plan


def apply_heading_ids(headers: Sequence[HeadingNode], plan: dict[int, str]) -> list[HeadingNode]:
    """Write planned ids to the heading elements.

    Parameters
    ----------
    headers : sequence of HeadingNode
        Collected headings
    plan : dict of int to str
        Result of ``plan_heading_ids``

    Returns
    -------
    list of HeadingNode
        The headings with their ids filled in

    Raises
    ------
    ValueError
        If the plan would overwrite an existing id

    """
    annotated: list[HeadingNode] = []
    for header in headers:
        new_id = plan.get(header.position)
        if new_id is None:
            annotated.append(header)
            continue
        if header.id:
            raise ValueError(f"Heading {header.position} already has id {header.id!r}")
        if header.tag is not None:
            header.tag["id"] = new_id
        annotated.append(replace(header, id=new_id))

    if plan:
        logger.debug("Assigned %d heading id(s)", len(plan))
    return annotated
