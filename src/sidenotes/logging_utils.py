"""Logging setup for the sidenotes entry points.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached here, by the CLI. BeautifulSoup reports some input
problems through the ``warnings`` module rather than logging (for example
``MarkupResemblesLocatorWarning`` when the input looks like a file name or
URL instead of markup), so those warnings are routed into the same handlers.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(log_level: int | str) -> int:
    """Turn a level name or number into a numeric level; unknown names mean INFO."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send log records, and BeautifulSoup's warnings, to stderr and optionally a file.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name such as ``"DEBUG"``
    log_file : str, optional
        File that receives a copy of everything written to stderr
    trace_mode : bool, default False
        Prefix records with a timestamp and the logger name

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_level(log_level)
    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(level)
    _attach(root, logging.StreamHandler(sys.stderr), level, formatter)
    logging.captureWarnings(True)

    if log_file:
        try:
            _attach(root, logging.FileHandler(log_file, mode="a", encoding="utf-8"), level, formatter)
        except OSError as e:
            root.warning("Could not create log file %s: %s", log_file, e)
        else:
            root.info("Logging to file: %s", log_file)

    return root
