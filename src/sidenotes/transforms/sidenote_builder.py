#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sidenotes/transforms/sidenote_builder.py
"""Build sidenote markup from a footnote list item.

Given ``<li id="fn-1"><p>Text.</p></li>`` and the label ``"1"`` the builder
returns::

    <aside class="Sidenote" id="fn-1" role="doc-footnote">
     <p><small class="Sidenote-small"><sup class="Sidenote-number">1&thinsp;</sup>Text.</small></p>
     </aside>

The footnote itself is left untouched; the sidenote is assembled from copies
of its children.

"""

from __future__ import annotations

import copy
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, Tag

from sidenotes.constants import (
    DEFAULT_HTML_PARSER,
    LAYOUT_WHITESPACE,
    SIDENOTE_CLASS,
    SIDENOTE_NUMBER_CLASS,
    SIDENOTE_NUMBER_TAG,
    SIDENOTE_ROLE,
    SIDENOTE_SMALL_CLASS,
    SIDENOTE_SMALL_TAG,
    SIDENOTE_TAG,
    SYNTHETIC_PARAGRAPH_TAG,
    THIN_SPACE,
)
from sidenotes.utils.tree import class_list, is_element, is_whitespace_text


def owning_soup(el: PageElement) -> BeautifulSoup:
    """Return the BeautifulSoup object ``el`` belongs to, or a fresh empty one."""
    if isinstance(el, BeautifulSoup):
        return el
    for parent in el.parents:
        if isinstance(parent, BeautifulSoup):
            return parent
    return BeautifulSoup("", DEFAULT_HTML_PARSER)


def strip_edge_whitespace(children: list[PageElement]) -> list[PageElement]:
    """Drop whitespace-only text nodes from both ends of ``children``."""
    start, end = 0, len(children)
    while start < end and is_whitespace_text(children[start]):
        start += 1
    while end > start and is_whitespace_text(children[end - 1]):
        end -= 1
    return children[start:end]


def wrap_inner(element: PageElement, wrapper: Tag) -> PageElement:
    """Move the children of ``element`` into ``wrapper`` and make it the only child.

    Non-element nodes are returned unchanged.
    """
    if not is_element(element):
        return element
    for child in list(element.contents):
        wrapper.append(child.extract())
    element.append(wrapper)
    return element


def _sidenote_attrs(footnote_el: Tag) -> dict[str, object]:
    attrs: dict[str, object] = {"class": [SIDENOTE_CLASS, *class_list(footnote_el)]}
    for name, value in footnote_el.attrs.items():
        if name == "class":
            continue
        attrs[name] = list(value) if isinstance(value, list) else value
    attrs["role"] = SIDENOTE_ROLE
    return attrs


def convert_footnote_to_sidenote(
    footnote_el: Tag,
    label: str,
    soup: Optional[BeautifulSoup] = None,
) -> Tag:
    """Convert a footnote element into a new sidenote element.

    Parameters
    ----------
    footnote_el : Tag
        The footnote list item to convert. It is not modified.
    label : str
        Visible text of the footnote's reference, used as the sidenote number
    soup : BeautifulSoup, optional
        Document used to create the new tags. Defaults to the document
        ``footnote_el`` belongs to.

    Returns
    -------
    Tag
        A detached ``aside`` element ready to be inserted into the document

    """
    factory = soup if soup is not None else owning_soup(footnote_el)

    children = strip_edge_whitespace([copy.copy(child) for child in footnote_el.contents])
    if not children or not is_element(children[0]):
        paragraph = factory.new_tag(SYNTHETIC_PARAGRAPH_TAG)
        for child in children:
            paragraph.append(child)
        children = [paragraph]

    number = factory.new_tag(SIDENOTE_NUMBER_TAG, attrs={"class": SIDENOTE_NUMBER_CLASS})
    number.string = f"{label}{THIN_SPACE}"
    children[0].insert(0, number)

    sidenote = factory.new_tag(SIDENOTE_TAG, attrs=_sidenote_attrs(footnote_el))
    sidenote.append(NavigableString(LAYOUT_WHITESPACE))
    for child in children:
        small = factory.new_tag(SIDENOTE_SMALL_TAG, attrs={"class": SIDENOTE_SMALL_CLASS})
        sidenote.append(wrap_inner(child, small))
    sidenote.append(NavigableString(LAYOUT_WHITESPACE))
    return sidenote
