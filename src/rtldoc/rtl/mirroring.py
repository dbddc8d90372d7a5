"""Structural mirroring for right-to-left layout.

An LTR table renderer places the first cell of a row on the left. Reversing
each row makes the logically first cell land on the right, where an RTL
reader starts. Mirroring only permutes; cell content is never touched.
"""

from typing import Sequence, TypeVar

T = TypeVar("T")


def mirror_row(row: Sequence[T]) -> list[T]:
    """Return a row with its cells in reverse order."""
    return list(reversed(row))


def mirror_table(rows: Sequence[Sequence[T]]) -> list[list[T]]:
    """Reverse the column order of every row, keeping row order.

    Column widths are not permuted here: callers give them in visual
    order.
    """
    return [mirror_row(row) for row in rows]


def bordered_rows(row_count: int) -> list[int]:
    """Return the indices of rows that get a bottom border.

    The header row and the row just before the last (the boundary above
    the total row) are highlighted. For two rows both rules point at the
    header.

    Args:
        row_count: Number of rows in the table.

    Returns:
        Sorted, de-duplicated row indices.
    """
    if row_count <= 0:
        return []
    return sorted({0, max(row_count - 2, 0)})
