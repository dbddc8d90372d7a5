"""The placement interface documents are composed against."""

from pathlib import Path
from typing import Optional, Protocol, Sequence, Union

from rtldoc.models import Align, BorderSide, CellInput, CellStyle, FontStyle


class Canvas(Protocol):
    """
    A left-to-right layout target with a vertical cursor.

    Implementations place whatever they are given left to right; they
    know nothing about bidirectional text. Calls are issued in document
    order and each placement advances the cursor below what it drew.
    """

    @property
    def bounds_width(self) -> float:
        """Usable width between the page margins."""
        ...

    def text(
        self,
        markup: str,
        *,
        align: Align = Align.LEFT,
        size: Optional[float] = None,
        style: FontStyle = FontStyle.NORMAL,
        color: Optional[str] = None,
        inline_format: bool = False,
    ) -> None:
        """Place a block of text at the cursor."""
        ...

    def table(
        self,
        rows: Sequence[Sequence[CellInput]],
        *,
        width: Optional[float] = None,
        position: Align = Align.LEFT,
        column_widths: Optional[Sequence[float]] = None,
        cell_style: Optional[CellStyle] = None,
        row_borders: Optional[dict[int, Sequence[BorderSide]]] = None,
    ) -> None:
        """Place a table at the cursor."""
        ...

    def image(self, data: bytes, *, height: float, position: Align = Align.LEFT) -> None:
        """Place an image scaled to a height at the cursor."""
        ...

    def move_down(self, amount: float) -> None:
        """Advance the cursor."""
        ...

    def move_up(self, amount: float) -> None:
        """Move the cursor back up."""
        ...

    def to_bytes(self) -> bytes:
        """Return the finished document."""
        ...

    def save(self, path: Union[str, Path]) -> None:
        """Write the finished document to a file."""
        ...
