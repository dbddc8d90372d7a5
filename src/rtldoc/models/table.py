"""Table models handed to the renderer."""

from typing import Optional, Union

from pydantic import Field

from .base import Align, BaseDocModel, BorderSide

# Padding as (top, right, bottom, left), in points.
Padding = tuple[float, float, float, float]

ALL_SIDES = [BorderSide.TOP, BorderSide.RIGHT, BorderSide.BOTTOM, BorderSide.LEFT]


class CellStyle(BaseDocModel):
    """Style applied to every cell of a table unless a cell overrides it."""

    padding: Padding = (5.0, 5.0, 5.0, 5.0)
    borders: list[BorderSide] = Field(default_factory=lambda: list(ALL_SIDES))
    border_color: str = Field(default="000000", description="Hex RGB, no leading #")
    border_width: float = Field(default=1.0, ge=0.0)
    align: Align = Align.LEFT
    inline_format: bool = Field(
        default=False, description="Interpret cell content as inline markup"
    )


class TableCell(BaseDocModel):
    """
    A single table cell.

    Only the content and an optional padding override are per-cell;
    everything else comes from the table's CellStyle.
    """

    content: str = ""
    padding: Optional[Padding] = None


CellInput = Union[str, TableCell]
