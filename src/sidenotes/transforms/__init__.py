#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sidenotes/transforms/__init__.py
"""Tree transforms provided by sidenotes."""

from sidenotes.transforms.sidenote_builder import convert_footnote_to_sidenote
from sidenotes.transforms.sidenotes import (
    SidenoteTransformer,
    convert_footnote,
    remaining_footnote_ids,
    transform,
)

__all__ = [
    "SidenoteTransformer",
    "convert_footnote",
    "convert_footnote_to_sidenote",
    "remaining_footnote_ids",
    "transform",
]
