#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for htmltoc.

Reads a rendered HTML page, injects its table of contents at the ``[toc]``
marker and writes the result. Option flags are generated from the
``TocOptions`` fields, so every option available to the library is also
available here.

Configuration priority (highest first): command line flags, the file given
with ``--config``, the file named by the ``HTMLTOC_CONFIG`` environment
variable, an auto-discovered ``.htmltoc.toml``/``.yaml``/``.json`` or
``pyproject.toml`` ``[tool.htmltoc]`` section.

Examples
--------
Inject the TOC in place::

    $ htmltoc page.html --out page.html

Only list levels 2 and 3, with a collapsible heading::

    $ htmltoc page.html --min-level 2 --max-level 3 --heading Contents --toggle

Render through a page template that places ``{{ toc }}`` in a sidebar::

    $ htmltoc page.html --template layout.html --out site/page.html

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import MISSING, fields
from pathlib import Path
from typing import Any, Optional

from htmltoc import __version__
from htmltoc.api import TocResult, inject_toc
from htmltoc.config import load_config_with_priority, resolve_options
from htmltoc.constants import CONFIG_ENV_VAR
from htmltoc.exceptions import DependencyError, ParsingError, RenderingError, ValidationError
from htmltoc.logging_utils import configure_logging
from htmltoc.options import TocOptions
from htmltoc.toc.tree import TocList

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

# Option dests are prefixed so they never collide with the CLI's own flags
_OPTION_DEST_PREFIX = "opt_"


def snake_to_kebab(name: str) -> str:
    """Convert an option field name to its flag spelling (``min_level`` -> ``min-level``)."""
    return name.replace("_", "-")


def add_option_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one flag per ``TocOptions`` field, using the field metadata.

    Every flag defaults to None so that only flags given on the command line
    override configuration files.
    """
    group = parser.add_argument_group("TOC options")
    for option in fields(TocOptions):
        metadata = dict(option.metadata)
        kwargs: dict[str, Any] = {
            "dest": f"{_OPTION_DEST_PREFIX}{option.name}",
            "default": None,
        }
        default = option.default if option.default is not MISSING else None
        help_text = metadata.get("help", "")
        kind = metadata.get("type", str)

        if kind is bool:
            kwargs["action"] = argparse.BooleanOptionalAction
        elif "choices" in metadata:
            kwargs["type"] = kind
            kwargs["choices"] = list(metadata["choices"])
        else:
            kwargs["type"] = kind
            kwargs["metavar"] = option.name.upper()

        kwargs["help"] = f"{help_text} [{default!r}]"
        group.add_argument(f"--{snake_to_kebab(option.name)}", **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="htmltoc",
        description="Generate a table of contents for a rendered HTML page and inject it at the [toc] marker.",
    )
    parser.add_argument("input", help="HTML file to process ('-' reads standard input)")
    parser.add_argument("-o", "--out", help="Output file (default: standard output)")
    parser.add_argument("--config", help=f"Configuration file (default: ${CONFIG_ENV_VAR} or discovered)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    parser.add_argument("--template", help="Jinja2 page template rendered with 'content' and 'toc'")
    parser.add_argument("--toc-only", action="store_true", help="Write only the TOC container markup")
    parser.add_argument("--outline", action="store_true", help="Print the TOC tree to standard error")

    add_option_arguments(parser)

    logging_group = parser.add_argument_group("Logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log output to this file")
    logging_group.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level DEBUG")
    logging_group.add_argument("--trace", action="store_true", help="Verbose logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace or (parsed_args.verbose and parsed_args.log_level == "WARNING"):
        log_level: int | str = logging.DEBUG
    else:
        log_level = parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def collect_cli_overrides(parsed_args: argparse.Namespace) -> dict[str, Any]:
    """Return the option values given on the command line."""
    overrides: dict[str, Any] = {}
    for key, value in vars(parsed_args).items():
        if key.startswith(_OPTION_DEST_PREFIX) and value is not None:
            overrides[key[len(_OPTION_DEST_PREFIX) :]] = value
    return overrides


def resolve_cli_options(parsed_args: argparse.Namespace) -> TocOptions:
    """Resolve options from configuration files and command line flags."""
    config: dict[str, Any] = {}
    if not parsed_args.no_config:
        config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
    return resolve_options(config, collect_cli_overrides(parsed_args))


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(text: str, destination: Optional[str]) -> None:
    if destination:
        Path(destination).write_text(text, encoding="utf-8")
        logger.info("Wrote %s", destination)
    else:
        sys.stdout.write(text)


def print_outline(tree: Optional[TocList]) -> None:
    """Print the TOC tree to standard error using rich."""
    from rich.console import Console
    from rich.tree import Tree

    console = Console(stderr=True)
    if tree is None:
        console.print("[yellow]No table of contents generated[/yellow]")
        return

    root = Tree("[bold]Table of Contents[/bold]")

    def _add(branch: Tree, toc_list: TocList) -> None:
        for item in toc_list.items:
            node = branch.add(f"{item.label} [dim]h{item.level} {item.anchor}[/dim]")
            if item.children:
                _add(node, item.children)

    _add(root, tree)
    console.print(root)


def render_output(result: TocResult, parsed_args: argparse.Namespace) -> str:
    """Produce the text written to the output destination."""
    if parsed_args.toc_only:
        return result.toc_html
    if parsed_args.template:
        from htmltoc.templating import build_template_context, render_template_file

        return render_template_file(parsed_args.template, build_template_context(result))
    return result.content


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code."""
    if isinstance(exception, DependencyError):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    try:
        options = resolve_cli_options(parsed_args)
        content = _read_input(parsed_args.input)
        result = inject_toc(content, options)
        if parsed_args.outline:
            print_outline(result.tree)
        _write_output(render_output(result, parsed_args), parsed_args.out)
    except (ValidationError, DependencyError, ParsingError, RenderingError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS
