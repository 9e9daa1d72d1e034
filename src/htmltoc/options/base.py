#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes and helpers for htmltoc options.

This module defines the frozen-dataclass foundation used by ``TocOptions``
and the value coercion applied when options arrive from configuration files,
page metadata or marker attributes, where everything may be a string.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from htmltoc.exceptions import ConfigurationError

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})
_NONE_STRINGS = frozenset({"", "none", "null", "~"})


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        Raises
        ------
        ConfigurationError
            If a keyword does not name a field

        """
        known = {f.name for f in fields(self)}  # type: ignore[arg-type]
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown option(s): {', '.join(unknown)}", parameter_name=unknown[0], parameter_value=kwargs[unknown[0]]
            )
        return replace(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the field values as a plain dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]


def coerce_option_value(name: str, value: Any, kind: type, *, nullable: bool = False) -> Any:
    """Coerce a raw configuration value to the declared type of an option.

    Parameters
    ----------
    name : str
        Option name, used in error messages
    value : Any
        Raw value from a config file, page metadata or marker attribute
    kind : type
        Target type (``int``, ``bool`` or ``str``)
    nullable : bool, default False
        Whether ``None`` (or a null-like string) is an accepted value

    Returns
    -------
    Any
        The coerced value

    Raises
    ------
    ConfigurationError
        If the value cannot be interpreted as the target type

    """
    if value is None or (nullable and isinstance(value, str) and value.strip().lower() in _NONE_STRINGS):
        if nullable:
            return None
        raise ConfigurationError(f"Option '{name}' cannot be null", parameter_name=name, parameter_value=value)

    if kind is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise ConfigurationError(
            f"Option '{name}' expects a boolean, got {value!r}", parameter_name=name, parameter_value=value
        )

    if kind is int:
        # bool is an int subclass; "toc_min_level: true" is a mistake, not 1
        if isinstance(value, bool):
            raise ConfigurationError(
                f"Option '{name}' expects an integer, got {value!r}", parameter_name=name, parameter_value=value
            )
        try:
            return int(str(value).strip()) if isinstance(value, str) else int(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Option '{name}' expects an integer, got {value!r}",
                parameter_name=name,
                parameter_value=value,
                original_error=e,
            ) from e

    if kind is str:
        if isinstance(value, (dict, list, tuple, set)):
            raise ConfigurationError(
                f"Option '{name}' expects a string, got {type(value).__name__}",
                parameter_name=name,
                parameter_value=value,
            )
        return str(value)

    return value
