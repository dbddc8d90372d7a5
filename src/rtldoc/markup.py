"""Inline markup fragments.

A fragment is a string of text with a small set of inline tags, for
example ``<b>Total</b> <color rgb='326d92'>$10</color>``. Fragments are
parsed with lxml into a tree under a synthetic wrapper element; text
content lives in element ``text`` and ``tail`` slots, which are the
fragment's text leaves.

Fragments must be well-formed: tags properly nested and closed. An
ampersand that does not start an entity reference is taken literally and
comes back out as ``&amp;``.
"""

import re
from copy import deepcopy
from typing import Callable

from lxml import etree

from rtldoc.errors import MarkupError

WRAPPER_TAG = "fragment"

_parser = etree.XMLParser(recover=False, resolve_entities=False, no_network=True)

# "&" not followed by a named or numeric entity reference.
_BARE_AMPERSAND = re.compile(r"&(?!#?\w+;)")


def parse_fragment(text: str) -> etree._Element:
    """Parse a markup fragment into a tree rooted at a wrapper element.

    Args:
        text: Markup fragment (plain text is a valid fragment).

    Returns:
        Wrapper element whose children are the fragment's top-level tags.

    Raises:
        MarkupError: If the fragment is not well-formed.
    """
    try:
        escaped = _BARE_AMPERSAND.sub("&amp;", text)
        return etree.fromstring(f"<{WRAPPER_TAG}>{escaped}</{WRAPPER_TAG}>", _parser)
    except etree.XMLSyntaxError as e:
        raise MarkupError(f"Malformed markup {text!r}: {e}") from e


def serialize_fragment(root: etree._Element) -> str:
    """Serialize a wrapper element back to a markup fragment string."""
    parts = [_escape(root.text or "")]
    for child in root:
        parts.append(etree.tostring(child, encoding="unicode", with_tail=True))
    return "".join(parts)


def map_text(root: etree._Element, transform: Callable[[str], str]) -> etree._Element:
    """Build a copy of a tree with every text leaf passed through a function.

    Tag names, attributes and structure are copied as-is. The input tree
    is left untouched.

    Args:
        root: Tree to copy.
        transform: Function applied to each non-empty text leaf.

    Returns:
        New tree of the same shape.
    """
    copy = etree.Element(root.tag, dict(root.attrib))
    copy.text = _apply(root.text, transform)
    for child in root:
        if isinstance(child.tag, str):
            new_child = map_text(child, transform)
        else:
            # Comments and processing instructions carry no visible text.
            new_child = deepcopy(child)
        new_child.tail = _apply(child.tail, transform)
        copy.append(new_child)
    return copy


def text_leaves(root: etree._Element) -> list[str]:
    """Return the non-empty text leaves of a tree in document order."""
    leaves = []
    if root.text:
        leaves.append(root.text)
    for child in root:
        if isinstance(child.tag, str):
            leaves.extend(text_leaves(child))
        if child.tail:
            leaves.append(child.tail)
    return leaves


def _apply(text, transform):
    if not text:
        return text
    return transform(text)


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
