"""PDF canvas built on PyMuPDF.

Places text runs, tables and images top to bottom on fixed-size pages.
The canvas has no notion of text direction: runs are drawn left to
right exactly as given, which is why documents hand it text that has
already been shaped, reordered and mirrored.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

import fitz  # PyMuPDF
from PIL import Image

from rtldoc.config import settings
from rtldoc.errors import ConfigurationError, ResourceError
from rtldoc.models import (
    Align,
    BorderSide,
    CellInput,
    CellStyle,
    FontFamily,
    FontStyle,
    Padding,
    TableCell,
)
from rtldoc.render.fonts import FontSet
from rtldoc.render.inline import TextRun, parse_runs

logger = logging.getLogger(__name__)

# Line height as a multiple of the font size
LEADING = 1.2

PageSize = Union[str, tuple[float, float]]


def resolve_page_size(page_size: PageSize) -> tuple[float, float]:
    """Convert a paper name or (width, height) pair to points."""
    if isinstance(page_size, str):
        width, height = fitz.paper_size(page_size.lower())
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"Unknown page size: {page_size}")
        return float(width), float(height)

    width, height = page_size
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"Invalid page size: {page_size}")
    return float(width), float(height)


def hex_to_rgb(value: str) -> tuple[float, float, float]:
    """Convert 'rrggbb' to a PyMuPDF color tuple."""
    value = value.lstrip("#")
    if len(value) != 6:
        raise ConfigurationError(f"Invalid color: {value!r}")
    try:
        return tuple(int(value[i : i + 2], 16) / 255 for i in (0, 2, 4))
    except ValueError as e:
        raise ConfigurationError(f"Invalid color: {value!r}") from e


@dataclass
class CellLayout:
    """A measured table cell."""

    lines: list[list[TextRun]]
    padding: Padding
    content_width: float
    height: float

    @property
    def natural_width(self) -> float:
        return self.content_width + self.padding[1] + self.padding[3]


class PdfCanvas:
    """Layout target that writes a PDF document.

    Coordinates are PDF points with the origin at the top-left corner of
    the page. `cursor` is the y position where the next placement starts.
    """

    def __init__(
        self,
        page_size: Optional[PageSize] = None,
        fonts: Optional[FontFamily] = None,
        font_size: Optional[float] = None,
        margin: Optional[float] = None,
    ):
        """Initialize canvas with an empty first page.

        Args:
            page_size: Paper name or (width, height) in points (default from settings).
            fonts: Font family to embed (default: built-in Helvetica).
            font_size: Base font size (default from settings).
            margin: Page margin on every side (default from settings).
        """
        self.page_width, self.page_height = resolve_page_size(page_size or settings.page_size)
        self.margin = settings.page_margin if margin is None else margin
        self.font_size = font_size or settings.font_size
        self.fonts = FontSet(fonts)

        self.doc = fitz.open()
        self.page = None
        self.cursor = 0.0
        self.start_new_page()

    @property
    def bounds_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def bounds_bottom(self) -> float:
        return self.page_height - self.margin

    @property
    def page_count(self) -> int:
        return len(self.doc)

    def start_new_page(self) -> None:
        """Append a page and move the cursor to its top margin."""
        self.page = self.doc.new_page(width=self.page_width, height=self.page_height)
        self.cursor = self.margin
        logger.debug("Started page %d", self.page_count)

    def move_down(self, amount: float) -> None:
        self.cursor += amount

    def move_up(self, amount: float) -> None:
        self.cursor = max(self.margin, self.cursor - amount)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

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
        """Place text at the cursor, one line per newline.

        Args:
            markup: Text, or an inline markup fragment when inline_format is set.
            align: Horizontal alignment within the page margins.
            size: Font size (default: canvas base size).
            style: Base font style; <b> runs are always bold.
            color: Base hex color for runs without their own.
            inline_format: Interpret inline tags.
        """
        size = size or self.font_size
        line_height = size * LEADING

        for line in parse_runs(markup, inline_format):
            self._ensure_room(line_height)
            width = self._line_width(line, style, size)
            x = self.margin + _offset(width, self.bounds_width, align)
            self._draw_runs(line, x, self.cursor + size, style, size, color)
            self.cursor += line_height

    def _line_width(self, runs: list[TextRun], style: FontStyle, size: float) -> float:
        return sum(self.fonts.text_length(run.text, _run_style(run, style), size) for run in runs)

    def _draw_runs(
        self,
        runs: list[TextRun],
        x: float,
        baseline: float,
        style: FontStyle,
        size: float,
        color: Optional[str],
    ) -> None:
        for run in runs:
            run_style = _run_style(run, style)
            run_width = self.fonts.text_length(run.text, run_style, size)

            self.page.insert_text(
                fitz.Point(x, baseline),
                run.text,
                fontsize=size,
                fontname=self.fonts.fontname(run_style),
                fontfile=self.fonts.fontfile(run_style),
                color=hex_to_rgb(run.color or color or "000000"),
            )

            if run.link:
                area = fitz.Rect(x, baseline - size, x + run_width, baseline + size * (LEADING - 1))
                self.page.insert_link({"kind": fitz.LINK_URI, "from": area, "uri": run.link})

            x += run_width

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

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
        """Place a table at the cursor.

        Args:
            rows: Cells per row, first cell drawn leftmost.
            width: Total table width; natural widths are scaled to fit it.
            position: Horizontal placement of the table.
            column_widths: Explicit widths, one per column.
            cell_style: Style shared by all cells.
            row_borders: Border sides per row index, replacing the style's borders.

        Raises:
            ConfigurationError: If column_widths doesn't match the column count.
        """
        style = cell_style or CellStyle()
        grid = [[self._layout_cell(cell, style) for cell in row] for row in rows]
        if not grid:
            return

        column_count = max(len(row) for row in grid)
        widths = self._column_widths(grid, column_count, width, column_widths)
        left = self.margin + _offset(sum(widths), self.bounds_width, position)
        row_borders = row_borders or {}

        for index, row in enumerate(grid):
            height = max((cell.height for cell in row), default=0.0)
            self._ensure_room(height)

            x = left
            for column, cell in enumerate(row):
                self._draw_cell(cell, x, widths[column], style)
                self._draw_borders(x, widths[column], height, row_borders.get(index, style.borders), style)
                x += widths[column]

            self.cursor += height

    def _layout_cell(self, cell: CellInput, style: CellStyle) -> CellLayout:
        if isinstance(cell, TableCell):
            content, padding = cell.content, cell.padding or style.padding
        else:
            content, padding = cell, style.padding

        lines = parse_runs(content, style.inline_format)
        content_width = max(
            (self._line_width(line, FontStyle.NORMAL, self.font_size) for line in lines),
            default=0.0,
        )
        height = len(lines) * self.font_size * LEADING + padding[0] + padding[2]
        return CellLayout(lines, padding, content_width, height)

    def _column_widths(
        self,
        grid: list[list[CellLayout]],
        column_count: int,
        width: Optional[float],
        column_widths: Optional[Sequence[float]],
    ) -> list[float]:
        if column_widths is not None:
            if len(column_widths) != column_count:
                raise ConfigurationError(
                    f"Got {len(column_widths)} column widths for {column_count} columns"
                )
            return [float(w) for w in column_widths]

        natural = [
            max((row[column].natural_width for row in grid if column < len(row)), default=0.0)
            for column in range(column_count)
        ]
        total = sum(natural)
        if width is None:
            if total <= self.bounds_width:
                return natural
            width = self.bounds_width
        if total == 0:
            return [width / column_count] * column_count
        return [w * width / total for w in natural]

    def _draw_cell(self, cell: CellLayout, x: float, width: float, style: CellStyle) -> None:
        top, right, _, left = cell.padding
        box_width = width - left - right
        line_height = self.font_size * LEADING

        for number, line in enumerate(cell.lines):
            line_width = self._line_width(line, FontStyle.NORMAL, self.font_size)
            line_x = x + left + _offset(line_width, box_width, style.align)
            baseline = self.cursor + top + self.font_size + number * line_height
            self._draw_runs(line, line_x, baseline, FontStyle.NORMAL, self.font_size, None)

    def _draw_borders(
        self,
        x: float,
        width: float,
        height: float,
        sides: Sequence[BorderSide],
        style: CellStyle,
    ) -> None:
        if style.border_width <= 0:
            return

        top, bottom = self.cursor, self.cursor + height
        segments = {
            BorderSide.TOP: ((x, top), (x + width, top)),
            BorderSide.RIGHT: ((x + width, top), (x + width, bottom)),
            BorderSide.BOTTOM: ((x, bottom), (x + width, bottom)),
            BorderSide.LEFT: ((x, top), (x, bottom)),
        }
        color = hex_to_rgb(style.border_color)
        for side in sides:
            start, end = segments[BorderSide(side)]
            self.page.draw_line(start, end, color=color, width=style.border_width)

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def image(self, data: bytes, *, height: float, position: Align = Align.LEFT) -> None:
        """Place an image scaled to a height, keeping its aspect ratio.

        Raises:
            ResourceError: If the bytes are not a readable image.
        """
        try:
            with Image.open(io.BytesIO(data)) as img:
                pixel_width, pixel_height = img.size
        except OSError as e:
            raise ResourceError(f"Unreadable image: {e}") from e

        width = height * pixel_width / pixel_height
        self._ensure_room(height)

        x = self.margin + _offset(width, self.bounds_width, position)
        self.page.insert_image(fitz.Rect(x, self.cursor, x + width, self.cursor + height), stream=data)
        self.cursor += height

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        return self.doc.tobytes()

    def save(self, path: Union[str, Path]) -> None:
        self.doc.save(str(path))
        logger.info("Wrote %d page(s) to %s", self.page_count, path)

    def _ensure_room(self, height: float) -> None:
        """Start a new page when `height` doesn't fit below the cursor."""
        if self.cursor + height > self.bounds_bottom and self.cursor > self.margin:
            self.start_new_page()


def _offset(width: float, available: float, align: Align) -> float:
    align = Align(align)
    if align == Align.RIGHT:
        return available - width
    if align == Align.CENTER:
        return (available - width) / 2
    return 0.0


def _run_style(run: TextRun, style: FontStyle) -> FontStyle:
    return FontStyle.BOLD if run.bold else FontStyle(style)
