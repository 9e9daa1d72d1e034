#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration discovery, loading and option resolution for htmltoc.

This module handles discovery of configuration files, loading configs from
JSON, TOML or YAML, and resolving layered configuration (global defaults,
site configuration, page metadata, marker attributes) into one immutable
``TocOptions`` per render.

Site configuration may hold the TOC settings either as a nested table::

    toc:
      max_level: 3
      heading: Contents

or as flat prefixed keys::

    toc_max_level: 3
    toc_heading: Contents
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from htmltoc.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION, SITE_CONFIG_PREFIX, SITE_CONFIG_SECTION
from htmltoc.exceptions import ConfigurationError
from htmltoc.options import TocOptions, coerce_option_value

logger = logging.getLogger(__name__)

_OPTION_FIELDS = {f.name: f for f in fields(TocOptions)}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load [tool.htmltoc] section from pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.htmltoc] section, or empty dict if not found

    Raises
    ------
    ConfigurationError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading pyproject.toml {pyproject_path}: {e}", original_error=e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for ``.htmltoc.toml``, ``.htmltoc.yaml``,
    ``.htmltoc.yml``, ``.htmltoc.json`` and finally ``pyproject.toml`` with a
    ``[tool.htmltoc]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigurationError:
                logger.debug("Ignoring unreadable %s during config discovery", pyproject_path)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover configuration file in standard locations.

    Searches parent directories first (see ``find_config_in_parents``), then
    falls back to the user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigurationError
        If the file cannot be read, parsed, or has invalid format

    Examples
    --------
    >>> config = load_config_file(".htmltoc.toml")
    >>> print(config.get("max_level"))
    3

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigurationError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Invalid config file {config_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading config file {config_path}: {e}", original_error=e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def merge_configs(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> merge_configs({"toc": {"max_level": 3}}, {"toc": {"heading": "Contents"}})
    {'toc': {'max_level': 3, 'heading': 'Contents'}}

    """
    result = dict(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (HTMLTOC_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    ConfigurationError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        logger.debug("Loading config from --config: %s", explicit_path)
        return load_config_file(explicit_path)

    if env_var_path:
        logger.debug("Loading config from environment: %s", env_var_path)
        return load_config_file(env_var_path)

    discovered = discover_config_file()
    if discovered:
        logger.debug("Using discovered config file: %s", discovered)
        return load_config_file(discovered)

    return {}


def normalize_key(key: str) -> str:
    """Normalize an option key (``max-level`` and ``MAX_LEVEL`` become ``max_level``)."""
    return key.strip().lower().replace("-", "_")


def extract_toc_settings(config: Optional[Mapping[str, Any]], *, bare: bool = True) -> Dict[str, Any]:
    """Pull the TOC settings out of a site or page configuration mapping.

    A nested ``toc`` table and flat ``toc_``-prefixed keys are both accepted;
    flat keys win over the nested table. With ``bare`` set, a mapping with
    neither is treated as a bare options mapping (the shape of a dedicated
    ``.htmltoc.*`` file); otherwise it yields no settings.

    Parameters
    ----------
    config : Mapping or None
        Site configuration, page metadata or bare options
    bare : bool, default True
        Accept a mapping without a ``toc`` section as bare options

    Returns
    -------
    dict
        Option keys (normalized) to raw values

    """
    if not config:
        return {}

    settings: Dict[str, Any] = {}
    found_section = False

    for key, value in config.items():
        name = normalize_key(str(key))
        if name == SITE_CONFIG_SECTION and isinstance(value, Mapping):
            found_section = True
            settings.update({normalize_key(str(k)): v for k, v in value.items()})

    for key, value in config.items():
        name = normalize_key(str(key))
        if name.startswith(SITE_CONFIG_PREFIX) and name[len(SITE_CONFIG_PREFIX) :] in _OPTION_FIELDS:
            found_section = True
            settings[name[len(SITE_CONFIG_PREFIX) :]] = value

    if found_section or not bare:
        return settings

    return {normalize_key(str(k)): v for k, v in config.items()}


def _coerce_settings(settings: Mapping[str, Any]) -> Dict[str, Any]:
    coerced: Dict[str, Any] = {}
    for key, value in settings.items():
        option = _OPTION_FIELDS.get(key)
        if option is None:
            logger.warning("Ignoring unknown TOC option '%s'", key)
            continue
        kind = option.metadata.get("type", str)
        nullable = bool(option.metadata.get("nullable", False))
        coerced[key] = coerce_option_value(key, value, kind, nullable=nullable)
    return coerced


def resolve_options(*layers: Optional[Mapping[str, Any]], base: Optional[TocOptions] = None) -> TocOptions:
    """Resolve layered configuration into one immutable ``TocOptions``.

    Layers are applied key by key in order, so later layers (page metadata,
    marker attributes, command line flags) take precedence over earlier ones
    (global defaults, site configuration).

    Parameters
    ----------
    *layers : Mapping or None
        Configuration mappings, lowest priority first; None entries are skipped
    base : TocOptions, optional
        Options the layers are applied on top of (defaults when omitted)

    Returns
    -------
    TocOptions
        Resolved, validated options

    Raises
    ------
    ConfigurationError
        If a value cannot be coerced or fails validation (e.g. ``tag="table"``)

    Examples
    --------
    >>> options = resolve_options({"toc_max_level": 3}, {"toc": {"heading": "Contents"}})
    >>> options.max_level, options.heading
    (3, 'Contents')

    """
    merged: Dict[str, Any] = {}
    for layer in layers:
        merged.update(extract_toc_settings(layer))

    values = _coerce_settings(merged)
    options = base or TocOptions()
    if not values:
        return options

    logger.debug("Resolved TOC options overrides: %s", values)
    return options.create_updated(**values)
