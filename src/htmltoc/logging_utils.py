"""Logging setup for the htmltoc command line.

The library itself only creates module loggers; handlers are installed
here, once, when the CLI starts.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a numeric level or a level name ("info", "DEBUG") into a level number."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _handler(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send htmltoc diagnostics to stderr and, optionally, a log file.

    Standard output is reserved for the transformed page, so the console
    handler always writes to stderr. Handlers from an earlier call are
    replaced.

    Parameters
    ----------
    log_level : int or str
        Level number or name
    log_file : str, optional
        File that receives a copy of every record
    trace_mode : bool, default False
        Prefix records with a timestamp and the logger name

    Returns
    -------
    logging.Logger
        The root logger

    """
    root = logging.getLogger()
    root.setLevel(resolve_log_level(log_level))
    root.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt="%H:%M:%S")
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)
    root.addHandler(_handler(logging.StreamHandler(sys.stderr), formatter))

    if log_file:
        try:
            root.addHandler(_handler(logging.FileHandler(log_file, encoding="utf-8"), formatter))
        except OSError as exc:
            root.warning("Cannot write log file %s: %s", log_file, exc)

    return root
