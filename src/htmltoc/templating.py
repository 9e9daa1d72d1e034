#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltoc/templating.py
"""Page template integration.

Exposes a TOC result to Jinja2 templates so a theme can place the TOC
anywhere (a sidebar, a header) instead of, or in addition to, the marker
position. The TOC and the content are passed as ``Markup`` so the
autoescaping environment does not escape them a second time.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markupsafe import Markup

from htmltoc.api import TocResult
from htmltoc.exceptions import RenderingError

logger = logging.getLogger(__name__)

DEFAULT_TOC_VARIABLE = "toc"


def build_template_context(
    result: TocResult, variable: str = DEFAULT_TOC_VARIABLE, **extra: Any
) -> dict[str, Any]:
    """Build the template variables for a processed page.

    Parameters
    ----------
    result : TocResult
        Result of ``inject_toc`` / ``process_page``
    variable : str, default "toc"
        Name under which the TOC markup is exposed
    **extra : Any
        Additional template variables (they may not shadow the TOC variable)

    Returns
    -------
    dict
        ``content`` and the TOC variable as ``Markup``, ``headings`` as a
        list of ``{"level", "id", "text"}`` dicts, plus ``extra``

    """
    context: dict[str, Any] = dict(extra)
    context.update(
        {
            "content": Markup(result.content),
            variable: Markup(result.toc_html),
            "headings": [{"level": h.level, "id": h.id, "text": h.text} for h in result.headers],
        }
    )
    return context


def _environment(loader: Optional[FileSystemLoader] = None) -> Environment:
    # nosemgrep: python.flask.security.xss.audit.direct-use-of-jinja2.direct-use-of-jinja2
    return Environment(loader=loader, autoescape=select_autoescape(["html", "xml"], default_for_string=True))


def render_template_string(source: str, context: dict[str, Any]) -> str:
    """Render a Jinja2 template given as a string.

    Raises
    ------
    RenderingError
        If the template cannot be compiled or rendered

    """
    try:
        return _environment().from_string(source).render(**context)
    except TemplateError as e:
        raise RenderingError(f"Failed to render template: {e}", template="<string>", original_error=e) from e


def render_template_file(template_path: Path | str, context: dict[str, Any]) -> str:
    """Render a Jinja2 template file.

    Parameters
    ----------
    template_path : Path or str
        Template file; its directory becomes the loader search path so the
        template can extend or include siblings
    context : dict
        Template variables, typically from ``build_template_context``

    Returns
    -------
    str
        Rendered page

    Raises
    ------
    RenderingError
        If the template does not exist or fails to render

    """
    template_path = Path(template_path)
    if not template_path.is_file():
        raise RenderingError(f"Template file not found: {template_path}", template=str(template_path))

    env = _environment(FileSystemLoader(str(template_path.parent)))
    try:
        template = env.get_template(template_path.name)
        logger.debug("Rendering template %s", template_path)
        return template.render(**context)
    except TemplateError as e:
        raise RenderingError(
            f"Failed to render template {template_path}: {e}", template=str(template_path), original_error=e
        ) from e
