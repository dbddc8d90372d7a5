"""Markup-preserving localization.

Converts logical-order fragments to visual order for a renderer with no
bidi support. Only text leaves are shaped and reordered; tags and
attribute values (link targets, colors) come through unchanged.
"""

import logging
from typing import Sequence, Union, overload

from rtldoc.markup import map_text, parse_fragment, serialize_fragment
from rtldoc.rtl.shaping import to_visual

logger = logging.getLogger(__name__)


def localize_fragment(text: str) -> str:
    """Localize a single markup fragment.

    Args:
        text: Fragment in logical order.

    Returns:
        Fragment of the same tree shape with visual-order text leaves.

    Raises:
        MarkupError: If the fragment is not well-formed.
    """
    tree = parse_fragment(text)
    return serialize_fragment(map_text(tree, to_visual))


@overload
def localize(text: None) -> None: ...


@overload
def localize(text: str) -> str: ...


@overload
def localize(text: Sequence[str]) -> list[str]: ...


def localize(
    text: Union[str, Sequence[str], None],
) -> Union[str, list[str], None]:
    """Localize a fragment or each fragment of a sequence.

    Sequences map one-to-one, in the same order; reversing the order of
    structural elements is mirroring's job, not this function's.
    Empty input comes back unchanged.
    """
    if text is None:
        return None
    if isinstance(text, str):
        if not text:
            return text
        return localize_fragment(text)

    logger.debug("Localizing %d fragments", len(text))
    return [localize(fragment) for fragment in text]
