#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sidenotes/cli/builder.py
"""Argument parser construction and exit codes for the sidenotes CLI.

Options that map onto :class:`SidenoteOptions` are generated from the
dataclass field metadata, so help text and choices live in one place.
"""

from __future__ import annotations

import argparse
from dataclasses import MISSING, fields
from typing import Any

from sidenotes.cli.actions import DynamicVersionAction, create_env_aware_argument
from sidenotes.exceptions import (
    DependencyError,
    FileError,
    IncompleteTransformError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from sidenotes.options import SidenoteOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
EXIT_INCOMPLETE_ERROR = 11


def _get_version() -> str:
    from sidenotes import __version__

    return f"sidenotes {__version__}"


def add_options_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one ``--field-name`` argument per SidenoteOptions field."""
    group = parser.add_argument_group("conversion options")
    for option in fields(SidenoteOptions):
        flag = f"--{option.name.replace('_', '-')}"
        kwargs: dict[str, Any] = {"dest": option.name, "help": option.metadata.get("help")}
        default = option.default if option.default is not MISSING else None
        if option.type in ("bool", bool):
            kwargs["action"] = "store_true"
            kwargs["default"] = default
        else:
            kwargs["default"] = default
            kwargs["metavar"] = option.name.upper()
            if option.metadata.get("choices"):
                kwargs["choices"] = list(option.metadata["choices"])
        create_env_aware_argument(group, flag, **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sidenotes",
        description="Move trailing HTML footnotes next to their references as sidenotes.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="HTML file to transform ('-' or omitted reads standard input)",
    )
    create_env_aware_argument(
        parser, "--out", "-o", dest="out", default=None, help="Output file (default: standard output)"
    )

    add_options_arguments(parser)

    logging_group = parser.add_argument_group("logging")
    create_env_aware_argument(
        logging_group,
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    create_env_aware_argument(logging_group, "--log-file", dest="log_file", default=None, help="Also log to this file")
    create_env_aware_argument(
        logging_group, "--verbose", "-v", dest="verbose", action="store_true", help="Shortcut for --log-level DEBUG"
    )
    create_env_aware_argument(
        logging_group,
        "--trace",
        dest="trace",
        action="store_true",
        help="Debug logging with timestamps and logger names",
    )

    parser.add_argument("--version", action=DynamicVersionAction, version_callback=_get_version)
    return parser


def options_from_args(parsed_args: argparse.Namespace) -> SidenoteOptions:
    """Build SidenoteOptions from parsed arguments."""
    values = {option.name: getattr(parsed_args, option.name) for option in fields(SidenoteOptions)}
    return SidenoteOptions(**{name: value for name, value in values.items() if value is not None})


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, IncompleteTransformError):
        return EXIT_INCOMPLETE_ERROR

    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
