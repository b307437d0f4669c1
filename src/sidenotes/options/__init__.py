#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the sidenotes host pipeline."""

from sidenotes.options.base import CloneFrozenMixin
from sidenotes.options.sidenotes import SidenoteOptions

__all__ = ["CloneFrozenMixin", "SidenoteOptions"]
