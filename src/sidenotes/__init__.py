#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sidenotes/__init__.py
"""Turn trailing HTML footnotes into inline sidenotes.

Markdown renderers collect footnotes in a list at the end of the document.
This library moves each one next to the paragraph that references it, as an
``<aside class="Sidenote">`` that stylesheets can float into the margin.

Examples
--------
Transform a parsed tree in place:

    >>> from bs4 import BeautifulSoup
    >>> from sidenotes import transform
    >>> soup = transform(BeautifulSoup(html, "html.parser"))

Work with strings:

    >>> from sidenotes import add_sidenotes
    >>> output = add_sidenotes(html)

"""

from sidenotes.api import add_sidenotes, add_sidenotes_to_file, parse_html, render_html
from sidenotes.exceptions import (
    IncompleteTransformError,
    SidenotesError,
)
from sidenotes.options import SidenoteOptions
from sidenotes.transforms import (
    SidenoteTransformer,
    convert_footnote_to_sidenote,
    remaining_footnote_ids,
    transform,
)

__version__ = "0.3.0"

__all__ = [
    "IncompleteTransformError",
    "SidenoteOptions",
    "SidenoteTransformer",
    "SidenotesError",
    "__version__",
    "add_sidenotes",
    "add_sidenotes_to_file",
    "convert_footnote_to_sidenote",
    "parse_html",
    "remaining_footnote_ids",
    "render_html",
    "transform",
]
