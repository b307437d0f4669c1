#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sidenotes/utils/tree.py
"""Predicates and locators over a BeautifulSoup document tree.

Every helper here reports a failed lookup by returning ``None`` (or ``False``)
rather than raising, so a caller can give up on one footnote without
abandoning the rest of the document.

Nodes are compared by identity throughout. BeautifulSoup's ``Tag.__eq__``
compares markup, which would confuse two identical paragraphs.

"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from sidenotes.constants import (
    BLOCK_ELEMENTS,
    FOOTNOTE_ID_PATTERN,
    FOOTNOTE_ITEM_SELECTOR,
    FOOTNOTES_CLASS,
    FOOTNOTES_CONTAINER_SELECTOR,
    FOOTNOTES_DATA_ATTRIBUTE,
    LOGICAL_SECTION_ELEMENTS,
    REFERENCE_ATTRIBUTE,
)

logger = logging.getLogger(__name__)

# A tag or the document root; both carry children
Container = Union[Tag, BeautifulSoup]

# An element id or the element itself
Target = Union[str, PageElement]


# ---------------------------------------------------------------------------
# Node kinds
# ---------------------------------------------------------------------------


def is_root(node: object) -> bool:
    """Return True if ``node`` is the document root."""
    return isinstance(node, BeautifulSoup)


def is_element(node: object) -> bool:
    """Return True if ``node`` is an element (a tag that is not the root)."""
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def is_text(node: object) -> bool:
    """Return True for text nodes; comments, doctypes and CDATA are not text."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_whitespace_text(node: object) -> bool:
    """Return True for a text node holding nothing but whitespace."""
    return is_text(node) and not str(node).strip()


def class_list(tag: Tag) -> list[str]:
    """Return the class tokens of ``tag`` whether stored as a list or a string."""
    value = tag.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return list(value)


def is_footnotes_container(tag: object) -> bool:
    """Return True if ``tag`` marks a footnotes section."""
    if not isinstance(tag, Tag):
        return False
    return tag.has_attr(FOOTNOTES_DATA_ATTRIBUTE) or FOOTNOTES_CLASS in class_list(tag)


# ---------------------------------------------------------------------------
# Selector helpers
# ---------------------------------------------------------------------------


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def attribute_selector(name: str, value: str) -> str:
    """Build an exact-match attribute selector, e.g. ``[href="#fn:1"]``."""
    return f"[{name}={_quote(value)}]"


def id_selector(element_id: str) -> str:
    """Build a selector matching ``element_id`` without identifier escaping."""
    return attribute_selector("id", element_id)


def _self_or_descendant(tree: Container, selector: str) -> Optional[Tag]:
    if is_element(tree) and tree.css.match(selector):
        return tree
    return tree.select_one(selector)


def ancestors_within(node: PageElement, tree: Container) -> list[Container]:
    """Return the ancestors of ``node`` from its parent up to ``tree`` inclusive.

    The list is empty when ``node`` does not sit below ``tree``.
    """
    chain: list[Container] = []
    for parent in node.parents:
        chain.append(parent)
        if parent is tree:
            return chain
    return []


# ---------------------------------------------------------------------------
# Footnote lookups
# ---------------------------------------------------------------------------


def is_valid_footnote(el: Tag, tree: Container) -> bool:
    """Check whether ``el`` is a footnote this library can turn into a sidenote.

    Parameters
    ----------
    el : Tag
        Candidate footnote list item
    tree : Tag or BeautifulSoup
        Tree being transformed

    Returns
    -------
    bool
        True if the id looks like a footnote id (``...fn-3`` or ``...fn:3``),
        the element lives in a footnotes container within ``tree``, and some
        element in ``tree`` links to it.

    """
    footnote_id = el.get("id")
    if not isinstance(footnote_id, str):
        return False
    id_valid = FOOTNOTE_ID_PATTERN.search(footnote_id) is not None
    has_container = el is not tree and any(is_footnotes_container(a) for a in ancestors_within(el, tree))
    has_ref = tree.select_one(attribute_selector(REFERENCE_ATTRIBUTE, f"#{footnote_id}")) is not None
    return id_valid and has_container and has_ref


def find_ref(footnote: Tag, tree: Container) -> Optional[Tag]:
    """Find the first element in ``tree`` linking to ``footnote``.

    Parameters
    ----------
    footnote : Tag
        Footnote element to find the reference for
    tree : Tag or BeautifulSoup
        Tree to search in

    Returns
    -------
    Tag or None
        First element, in document order, whose ``href`` is ``#<footnote id>``

    """
    footnote_id = footnote.get("id")
    ref = tree.select_one(attribute_selector(REFERENCE_ATTRIBUTE, f"#{footnote_id}"))
    if ref is None:
        logger.warning("No reference found for footnote %r; the document may be malformed", footnote_id)
    return ref


def find_footnote_items(tree: Container) -> list[Tag]:
    """Return the footnote list items of every footnotes container, in document order.

    List items nested inside a footnote (a bulleted list in a note, say) are
    part of that footnote's content and are not returned.
    """
    items = tree.select(FOOTNOTE_ITEM_SELECTOR)
    collected = {id(item) for item in items}
    return [item for item in items if not any(id(parent) in collected for parent in item.parents)]


def find_footnote_containers(tree: Container) -> list[Tag]:
    """Return every footnotes container in ``tree``, outermost first."""
    containers = tree.select(FOOTNOTES_CONTAINER_SELECTOR)
    if is_footnotes_container(tree) and is_element(tree):
        containers.insert(0, tree)
    return containers


# ---------------------------------------------------------------------------
# Insertion point lookups
# ---------------------------------------------------------------------------


def element_depth(node: PageElement, current_depth: int = 0) -> int:
    """Return the depth of the deepest leaf below ``node``, counting ``node`` as 1.

    The walk keeps its own stack, so deeply nested documents do not hit the
    interpreter recursion limit.
    """
    deepest = 0
    stack: list[tuple[PageElement, int]] = [(node, current_depth + 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, Tag) and current.contents:
            stack.extend((child, depth + 1) for child in current.contents)
        elif depth > deepest:
            deepest = depth
    return deepest


def _resolve_target(target: Target, tree: Container) -> Optional[PageElement]:
    if isinstance(target, str):
        return _self_or_descendant(tree, id_selector(target))
    if target is tree or ancestors_within(target, tree):
        return target
    return None


def find_logical_section_parent(target: Target, tree: Container) -> Optional[Container]:
    """Find the sectioning element a sidenote for ``target`` belongs in.

    Candidates are the ``div``, ``section``, ``article`` and ``main`` elements
    that contain the target. They are ranked by the depth of the subtree
    beneath them, smallest first.

    Parameters
    ----------
    target : str or Tag
        Id of the footnote reference, or the reference element itself
    tree : Tag or BeautifulSoup
        Tree to search in

    Returns
    -------
    Tag, BeautifulSoup or None
        The best candidate. With no candidate, the document root when ``tree``
        is the root, otherwise None.

    """
    element = _resolve_target(target, tree)
    candidates: list[Container] = []
    if element is tree:
        candidates = [tree] if tree.name in LOGICAL_SECTION_ELEMENTS else []
    elif element is not None:
        candidates = [a for a in ancestors_within(element, tree) if a.name in LOGICAL_SECTION_ELEMENTS]
    # sorted() is stable, so equally deep candidates keep their order
    candidates = sorted(candidates, key=element_depth)
    if candidates:
        return candidates[0]
    if is_root(tree):
        return tree
    return None


def find_flow_parent(target: Target, section: Container) -> Optional[Tag]:
    """Find the block-level child of ``section`` that contains ``target``.

    Parameters
    ----------
    target : str or Tag
        Id of the footnote reference, or the reference element itself
    section : Tag or BeautifulSoup
        Logical section returned by :func:`find_logical_section_parent`

    Returns
    -------
    Tag or None
        First direct child of ``section`` with a block-level tag name that
        contains the target

    """
    for child in section.contents:
        if not is_element(child) or child.name not in BLOCK_ELEMENTS:
            continue
        if isinstance(target, str):
            if child.select_one(id_selector(target)) is not None:
                return child
        elif ancestors_within(target, child):
            return child
    return None


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------


def index_of_child(parent: Container, child: PageElement) -> int:
    """Return the position of ``child`` in ``parent.contents`` by identity, or -1."""
    for index, candidate in enumerate(parent.contents):
        if candidate is child:
            return index
    return -1


def _iter_containers(tree: Container) -> Iterator[Container]:
    # Depth-first, pre-order; the seen set stops runaway traversal of a corrupted tree
    stack: list[Container] = [tree]
    seen: set[int] = set()
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        stack.extend(reversed([child for child in node.contents if isinstance(child, Tag)]))


def find_parent_of_element(el: PageElement, tree: Container) -> Optional[Container]:
    """Search ``tree`` for the node whose children include ``el``."""
    for node in _iter_containers(tree):
        if index_of_child(node, el) != -1:
            return node
    return None


def remove_element(el: PageElement, tree: Container) -> Optional[PageElement]:
    """Detach ``el`` from ``tree``.

    Returns
    -------
    PageElement or None
        The removed node, or None when ``el`` is not in ``tree``

    """
    parent = find_parent_of_element(el, tree)
    if parent is None:
        return None
    return el.extract()


def insert_after(parent: Container, anchor: PageElement, *nodes: PageElement) -> bool:
    """Insert ``nodes`` right after ``anchor`` among ``parent``'s children.

    Returns False, inserting nothing, when ``anchor`` is not a child of ``parent``.
    """
    index = index_of_child(parent, anchor)
    if index == -1:
        return False
    for offset, node in enumerate(nodes, start=1):
        parent.insert(index + offset, node)
    return True


def get_text(el: PageElement) -> str:
    """Concatenate the text below ``el``; comments contribute nothing."""
    if is_text(el):
        return str(el)
    if not isinstance(el, Tag):
        return ""
    return "".join(str(node) for node in el.descendants if is_text(node))
