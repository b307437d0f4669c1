#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sidenotes/options/sidenotes.py
"""Options for parsing, serializing and checking documents around the transform.

The sidenote transform itself takes no configuration: footnotes are found by
fixed marker conventions. These options only govern how the host pipeline
reads HTML into a tree and writes it back out.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field, fields
from typing import Any

from sidenotes.constants import (
    DEFAULT_ENCODING,
    DEFAULT_HTML_FORMATTER,
    DEFAULT_HTML_PARSER,
    DEFAULT_STRICT,
    HTML_FORMATTER_CHOICES,
    HTML_PARSER_CHOICES,
    HtmlFormatter,
    HtmlParser,
)
from sidenotes.exceptions import ValidationError
from sidenotes.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class SidenoteOptions(CloneFrozenMixin):
    """Configuration for the HTML-in, HTML-out sidenotes pipeline.

    Parameters
    ----------
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup tree builder used to parse the input.
    formatter : {"minimal", "html", "html5"}, default "minimal"
        BeautifulSoup output formatter. "minimal" writes the thin space after
        sidenote numbers as a literal character, "html" writes ``&thinsp;``.
    encoding : str, default "utf-8"
        Text encoding for reading and writing files.
    strict : bool, default False
        Raise IncompleteTransformError when footnotes remain after the pass
        instead of only logging a warning.

    """

    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": (
                "BeautifulSoup parser to use: 'html.parser' (built-in), "
                "'html5lib' (browser-like, requires html5lib), 'lxml' (fast, requires lxml)"
            ),
            "choices": HTML_PARSER_CHOICES,
        },
    )
    formatter: HtmlFormatter = field(
        default=DEFAULT_HTML_FORMATTER,
        metadata={
            "help": "Output formatter: 'minimal' keeps characters literal, 'html' and 'html5' use named entities",
            "choices": HTML_FORMATTER_CHOICES,
        },
    )
    encoding: str = field(
        default=DEFAULT_ENCODING,
        metadata={"help": "Text encoding for input and output files"},
    )
    strict: bool = field(
        default=DEFAULT_STRICT,
        metadata={"help": "Fail when some footnotes cannot be converted to sidenotes"},
    )

    def __post_init__(self) -> None:
        """Validate choice-restricted fields."""
        for option in fields(self):
            choices = option.metadata.get("choices")
            value = getattr(self, option.name)
            if choices and value not in choices:
                raise ValidationError(
                    f"Invalid value for {option.name}: {value!r}. Expected one of: {', '.join(choices)}",
                    parameter_name=option.name,
                    parameter_value=value,
                )
        if not self.encoding:
            raise ValidationError("encoding must not be empty", parameter_name="encoding", parameter_value=self.encoding)
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValidationError(
                f"Unknown encoding: {self.encoding!r}",
                parameter_name="encoding",
                parameter_value=self.encoding,
                original_error=e,
            ) from e

    def to_dict(self) -> dict[str, Any]:
        """Return the options as a plain dictionary."""
        return {option.name: getattr(self, option.name) for option in fields(self)}
