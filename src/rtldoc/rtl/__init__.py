"""Right-to-left text and structure handling.

Layers, leaves first:
1. shaping - contextual letter forms and bidi reordering
2. localizer - shaping/reordering applied to markup text leaves
3. mirroring - column and pair reversal for LTR table placement
"""

from .localizer import localize, localize_fragment
from .mirroring import bordered_rows, mirror_row, mirror_table
from .shaping import reorder_visual, shape_text, to_visual

__all__ = [
    # Shaping
    "shape_text",
    "reorder_visual",
    "to_visual",
    # Localization
    "localize",
    "localize_fragment",
    # Mirroring
    "mirror_row",
    "mirror_table",
    "bordered_rows",
]
