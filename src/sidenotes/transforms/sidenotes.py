#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sidenotes/transforms/sidenotes.py
"""Relocate trailing footnotes into the document flow as sidenotes.

Each footnote in a GFM (``<section data-footnotes>``) or Multimarkdown
(``<div class="footnotes">``) footnotes list is rebuilt as an
``<aside class="Sidenote">`` and inserted right after the block that holds its
reference. Once every footnote has moved, the emptied footnotes container is
removed.

Footnotes that cannot be placed stay where they are. Nothing in the document
causes an exception; problems are reported through logging.

Examples
--------
    >>> from bs4 import BeautifulSoup
    >>> from sidenotes import transform
    >>> soup = BeautifulSoup(html, "html.parser")
    >>> transform(soup)

"""

from __future__ import annotations

import logging
from typing import Any, Generator

from bs4.element import NavigableString, Tag

from sidenotes.constants import LAYOUT_WHITESPACE
from sidenotes.transforms.sidenote_builder import convert_footnote_to_sidenote, owning_soup
from sidenotes.utils.maybe import maybe_do
from sidenotes.utils.tree import (
    Container,
    find_flow_parent,
    find_footnote_containers,
    find_footnote_items,
    find_logical_section_parent,
    find_ref,
    get_text,
    insert_after,
    is_valid_footnote,
    remove_element,
)

logger = logging.getLogger(__name__)


@maybe_do
def convert_footnote(footnote: Tag, tree: Container) -> Generator[Any, Any, Tag]:
    """Move one footnote next to its reference as a sidenote.

    Parameters
    ----------
    footnote : Tag
        Footnote list item
    tree : Tag or BeautifulSoup
        Tree being transformed

    Returns
    -------
    Tag or None
        The inserted sidenote, or None if the footnote was left in place

    """
    yield is_valid_footnote(footnote, tree) or None
    ref = yield find_ref(footnote, tree)
    sidenote = yield convert_footnote_to_sidenote(footnote, get_text(ref), owning_soup(tree))
    section = yield find_logical_section_parent(ref, tree)
    flow_parent = yield find_flow_parent(ref, section)
    yield insert_after(section, flow_parent, NavigableString(LAYOUT_WHITESPACE), sidenote) or None
    remove_element(footnote, tree)
    return sidenote


def remaining_footnote_ids(tree: Container) -> list[str]:
    """Return the ids of footnote items still inside a footnotes container."""
    return [str(item.get("id", "")) for item in find_footnote_items(tree)]


class SidenoteTransformer:
    """Convert every footnote in a tree into a sidenote.

    The transformer mutates the tree it is given and returns it. Instances
    are reusable; ``converted`` and ``skipped`` describe the most recent run.

    Attributes
    ----------
    converted : list of str
        Ids of footnotes converted, in processing (reverse document) order
    skipped : list of str
        Ids of footnotes left in place

    Examples
    --------
    >>> transformer = SidenoteTransformer()
    >>> soup = transformer.transform(soup)
    >>> transformer.converted
    ['user-content-fn-2', 'user-content-fn-1']

    """

    def __init__(self) -> None:
        """Initialize the transformer."""
        self.converted: list[str] = []
        self.skipped: list[str] = []

    def __call__(self, tree: Container) -> Container:
        """Transform ``tree``; lets an instance stand in for a plain function."""
        return self.transform(tree)

    def transform(self, tree: Container) -> Container:
        """Move all footnotes in ``tree`` into the flow and drop the emptied container.

        Parameters
        ----------
        tree : Tag or BeautifulSoup
            Document tree, modified in place

        Returns
        -------
        Tag or BeautifulSoup
            The same tree

        """
        self.converted = []
        self.skipped = []

        # Reverse order: each sidenote goes directly after its flow parent, so
        # notes sharing a flow parent end up in ascending order.
        for footnote in reversed(find_footnote_items(tree)):
            footnote_id = str(footnote.get("id", ""))
            if convert_footnote(footnote, tree) is None:
                logger.debug("Footnote %r left in place", footnote_id)
                self.skipped.append(footnote_id)
            else:
                logger.debug("Footnote %r converted to a sidenote", footnote_id)
                self.converted.append(footnote_id)

        self._remove_empty_containers(tree)
        return tree

    def _remove_empty_containers(self, tree: Container) -> None:
        for container in find_footnote_containers(tree):
            remaining = container.select("li")
            if remaining:
                logger.warning(
                    "%d footnote(s) could not be converted to sidenotes and were left in place: %s",
                    len(remaining),
                    ", ".join(str(item.get("id", "(no id)")) for item in remaining),
                )
            elif remove_element(container, tree) is not None:
                logger.debug("Removed empty footnotes container <%s>", container.name)


def transform(tree: Container) -> Container:
    """Convert the footnotes in ``tree`` to sidenotes and return the same tree."""
    return SidenoteTransformer().transform(tree)
