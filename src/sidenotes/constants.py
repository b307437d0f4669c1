#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the sidenotes library.

This module centralizes the marker conventions the transform recognizes and
the default configuration used by the host pipeline and CLI.

Constants are organized by category:
1. Type Definitions - Literal types for options
2. Footnote Markers - How footnotes, references and containers are recognized
3. Document Structure - Tag sets used to find insertion points
4. Sidenote Markup - Class names and text emitted by the builder
5. Defaults - Host pipeline and CLI defaults
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html.parser", "html5lib", "lxml"]
HtmlFormatter = Literal["minimal", "html", "html5"]

# =============================================================================
# Footnote Markers
# =============================================================================

# GFM renders ids like ``user-content-fn-3``, Multimarkdown renders ``fn:3``
FOOTNOTE_ID_PATTERN = re.compile(r"fn[-:]\d+$")

FOOTNOTES_DATA_ATTRIBUTE = "data-footnotes"
FOOTNOTES_CLASS = "footnotes"

FOOTNOTES_CONTAINER_SELECTOR = f"[{FOOTNOTES_DATA_ATTRIBUTE}], .{FOOTNOTES_CLASS}"
FOOTNOTE_ITEM_SELECTOR = f"[{FOOTNOTES_DATA_ATTRIBUTE}] li, .{FOOTNOTES_CLASS} li"

REFERENCE_ATTRIBUTE = "href"

# =============================================================================
# Document Structure
# =============================================================================

BLOCK_ELEMENTS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "canvas",
        "dd",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hgroup",
        "hr",
        "li",
        "main",
        "nav",
        "noscript",
        "ol",
        "output",
        "p",
        "pre",
        "section",
        "table",
        "tfoot",
        "ul",
        "video",
    }
)

LOGICAL_SECTION_ELEMENTS = ("div", "section", "article", "main")

# =============================================================================
# Sidenote Markup
# =============================================================================

SIDENOTE_TAG = "aside"
SIDENOTE_CLASS = "Sidenote"
SIDENOTE_ROLE = "doc-footnote"
SIDENOTE_SMALL_TAG = "small"
SIDENOTE_SMALL_CLASS = "Sidenote-small"
SIDENOTE_NUMBER_TAG = "sup"
SIDENOTE_NUMBER_CLASS = "Sidenote-number"
SYNTHETIC_PARAGRAPH_TAG = "p"

THIN_SPACE = "\u2009"

# Text node placed before each inserted sidenote and around its children
LAYOUT_WHITESPACE = "\n "

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_HTML_PARSER: HtmlParser = "html.parser"
DEFAULT_HTML_FORMATTER: HtmlFormatter = "minimal"
DEFAULT_ENCODING = "utf-8"
DEFAULT_STRICT = False

HTML_PARSER_CHOICES: tuple[str, ...] = ("html.parser", "html5lib", "lxml")
HTML_FORMATTER_CHOICES: tuple[str, ...] = ("minimal", "html", "html5")

ENV_PREFIX = "SIDENOTES_"
