#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sidenotes/api.py
"""HTML in, HTML out: the host pipeline around the sidenote transform.

The transform works on a parsed tree. These helpers parse HTML text with
BeautifulSoup, run the transform and serialize the result, so callers with
plain strings or files do not have to deal with the tree.

Examples
--------
    >>> from sidenotes import add_sidenotes
    >>> html = add_sidenotes(open("post.html").read())

    >>> from sidenotes import SidenoteOptions, add_sidenotes_to_file
    >>> add_sidenotes_to_file("post.html", "post.sidenotes.html", SidenoteOptions(html_parser="lxml"))

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.exceptions import FeatureNotFound

from sidenotes.exceptions import (
    DependencyError,
    FileAccessError,
    FileNotFoundError,
    IncompleteTransformError,
    OutputWriteError,
    ParsingError,
    RenderingError,
)
from sidenotes.options import SidenoteOptions
from sidenotes.transforms.sidenotes import SidenoteTransformer, remaining_footnote_ids

logger = logging.getLogger(__name__)

_PARSER_PACKAGES = {"html5lib": "html5lib", "lxml": "lxml"}


def parse_html(html: str, options: Optional[SidenoteOptions] = None) -> BeautifulSoup:
    """Parse HTML text into a BeautifulSoup tree.

    Parameters
    ----------
    html : str
        HTML document or fragment
    options : SidenoteOptions, optional
        Selects the tree builder

    Returns
    -------
    BeautifulSoup
        The parsed document root

    Raises
    ------
    DependencyError
        If the selected parser is not installed
    ParsingError
        If the parser fails on the input

    """
    options = options or SidenoteOptions()
    try:
        return BeautifulSoup(html, options.html_parser)
    except FeatureNotFound as e:
        package = _PARSER_PACKAGES.get(options.html_parser)
        raise DependencyError(
            f"HTML parser {options.html_parser!r} is not available: {e}",
            missing_packages=[(package, "")] if package else [],
            original_error=e,
        ) from e
    except ParserRejectedMarkup as e:
        raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="parse", original_error=e) from e


def render_html(soup: BeautifulSoup, options: Optional[SidenoteOptions] = None) -> str:
    """Serialize a tree back to HTML text using the configured formatter."""
    options = options or SidenoteOptions()
    try:
        return soup.decode(formatter=options.formatter)
    except (ValueError, TypeError) as e:
        raise RenderingError(f"Failed to serialize HTML: {e}", rendering_stage="serialize", original_error=e) from e


def transform_soup(soup: BeautifulSoup, options: Optional[SidenoteOptions] = None) -> BeautifulSoup:
    """Run the sidenote transform on ``soup``, enforcing ``options.strict``.

    Raises
    ------
    IncompleteTransformError
        In strict mode, if any footnote could not be converted

    """
    options = options or SidenoteOptions()
    transformer = SidenoteTransformer()
    transformer.transform(soup)
    logger.info(
        "Converted %d footnote(s) to sidenotes, %d left in place",
        len(transformer.converted),
        len(transformer.skipped),
    )
    if options.strict:
        remaining = remaining_footnote_ids(soup)
        if remaining:
            raise IncompleteTransformError(remaining)
    return soup


def add_sidenotes(html: str, options: Optional[SidenoteOptions] = None) -> str:
    """Convert the footnotes in an HTML string to sidenotes.

    Parameters
    ----------
    html : str
        HTML document or fragment with a trailing footnotes list
    options : SidenoteOptions, optional
        Parser, formatter and strictness settings

    Returns
    -------
    str
        The transformed HTML

    """
    options = options or SidenoteOptions()
    soup = parse_html(html, options)
    transform_soup(soup, options)
    return render_html(soup, options)


def add_sidenotes_to_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path, None] = None,
    options: Optional[SidenoteOptions] = None,
) -> str:
    """Convert the footnotes in an HTML file to sidenotes.

    Parameters
    ----------
    input_path : str or Path
        HTML file to read
    output_path : str or Path, optional
        Where to write the result. Nothing is written when omitted.
    options : SidenoteOptions, optional
        Parser, formatter, encoding and strictness settings

    Returns
    -------
    str
        The transformed HTML

    Raises
    ------
    FileNotFoundError
        If ``input_path`` does not exist
    FileAccessError
        If ``input_path`` cannot be read or decoded
    OutputWriteError
        If ``output_path`` cannot be written

    """
    options = options or SidenoteOptions()
    source = Path(input_path)
    if not source.is_file():
        raise FileNotFoundError(str(source))
    try:
        html = source.read_text(encoding=options.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise FileAccessError(str(source), original_error=e) from e

    result = add_sidenotes(html, options)

    if output_path is not None:
        target = Path(output_path)
        try:
            target.write_text(result, encoding=options.encoding)
        except (OSError, UnicodeEncodeError, LookupError) as e:
            raise OutputWriteError(str(target), original_error=e) from e
        logger.info("Wrote %s", target)
    return result
