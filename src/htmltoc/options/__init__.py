#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for htmltoc.

Options are frozen dataclasses: they are resolved once per render (see
``htmltoc.config.resolve_options``) and never mutated afterwards. Use
``create_updated`` to derive a modified copy.
"""

from __future__ import annotations

from htmltoc.options.base import CloneFrozenMixin, coerce_option_value
from htmltoc.options.toc import TocOptions

__all__ = [
    "CloneFrozenMixin",
    "TocOptions",
    "coerce_option_value",
]
