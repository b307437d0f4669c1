"""Command-line interface for the sidenotes library.

Reads an HTML document, moves its footnotes next to their references as
sidenotes, and writes the result.

Environment Variable Support
----------------------------
All options support environment variable defaults using the pattern
SIDENOTES_<OPTION_NAME>, with option names uppercased and hyphens replaced
by underscores. CLI arguments always override environment variables.

Examples
--------
Transform a file to standard output::

    $ sidenotes post.html

Write to a file, failing if any footnote cannot be placed::

    $ sidenotes post.html --out post.sidenotes.html --strict

Use in a shell pipeline::

    $ pandoc post.md | sidenotes > post.html

"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from sidenotes.api import add_sidenotes, add_sidenotes_to_file
from sidenotes.cli.builder import EXIT_SUCCESS, create_parser, get_exit_code_for_exception, options_from_args
from sidenotes.exceptions import OutputWriteError, SidenotesError
from sidenotes.logging_utils import configure_logging, resolve_level

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = resolve_level(parsed_args.log_level)

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _run(parsed_args: argparse.Namespace) -> int:
    options = options_from_args(parsed_args)

    if parsed_args.input == "-":
        result = add_sidenotes(sys.stdin.read(), options)
        if parsed_args.out is None:
            sys.stdout.write(result)
            return EXIT_SUCCESS
        try:
            with open(parsed_args.out, "w", encoding=options.encoding) as handle:
                handle.write(result)
        except (OSError, UnicodeEncodeError, LookupError) as e:
            raise OutputWriteError(parsed_args.out, original_error=e) from e
        return EXIT_SUCCESS

    result = add_sidenotes_to_file(parsed_args.input, parsed_args.out, options)
    if parsed_args.out is None:
        sys.stdout.write(result)
    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sidenotes CLI.

    Parameters
    ----------
    argv : sequence of str, optional
        Arguments to parse instead of ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(argv)
    _setup_logging_level(parsed_args)

    try:
        return _run(parsed_args)
    except SidenotesError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
