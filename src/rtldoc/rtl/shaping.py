"""Letter shaping and bidi reordering.

Thin wrappers over arabic-reshaper (contextual letter forms) and
python-bidi (Unicode Bidi Algorithm). Both are pure string functions.
"""

import arabic_reshaper
from bidi.algorithm import get_display


def shape_text(text: str) -> str:
    """Substitute contextual Arabic letter forms, keeping logical order."""
    return arabic_reshaper.reshape(text)


def reorder_visual(text: str) -> str:
    """Reorder shaped logical text into visual (left-to-right) order."""
    return get_display(text)


def to_visual(text: str) -> str:
    """Shape then reorder a plain string.

    Each line is reordered on its own so multi-line text keeps its
    top-to-bottom line order.
    """
    return "\n".join(reorder_visual(shape_text(line)) for line in text.split("\n"))
