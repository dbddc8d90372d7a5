"""Tests for the PyMuPDF canvas."""

import fitz  # PyMuPDF
import pytest

from rtldoc.errors import ConfigurationError, ResourceError
from rtldoc.models import Align, BorderSide, CellStyle, FontStyle, TableCell
from rtldoc.render import PdfCanvas, hex_to_rgb, resolve_page_size
from rtldoc.render.canvas import LEADING


class TestPageSize:
    """Tests for page size resolution."""

    def test_letter(self):
        assert resolve_page_size("LETTER") == (612.0, 792.0)

    def test_a4(self):
        width, height = resolve_page_size("A4")
        assert round(width) == 595
        assert round(height) == 842

    def test_explicit_points(self):
        assert resolve_page_size((300, 400)) == (300.0, 400.0)

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError):
            resolve_page_size("NAPKIN")


class TestHexToRgb:
    """Tests for color conversion."""

    def test_conversion(self):
        assert hex_to_rgb("ff0000") == (1.0, 0.0, 0.0)

    def test_leading_hash(self):
        assert hex_to_rgb("#000000") == (0.0, 0.0, 0.0)

    def test_invalid(self):
        with pytest.raises(ConfigurationError):
            hex_to_rgb("zzzzzz")


class TestPdfCanvas:
    """Tests for placement on the PDF canvas."""

    @pytest.fixture
    def pdf(self):
        """Letter canvas with default margins and built-in fonts."""
        return PdfCanvas(page_size="LETTER", margin=36, font_size=8)

    def test_initial_state(self, pdf):
        assert pdf.bounds_width == 540
        assert pdf.cursor == 36
        assert pdf.page_count == 1

    def test_text_advances_one_line(self, pdf):
        pdf.text("Hello", size=10)

        assert pdf.cursor == pytest.approx(36 + 10 * LEADING)

    def test_text_advances_per_line(self, pdf):
        pdf.text("one\ntwo\nthree")

        assert pdf.cursor == pytest.approx(36 + 3 * 8 * LEADING)

    def test_text_is_written(self, pdf):
        pdf.text("Total due", align=Align.RIGHT, style=FontStyle.BOLD, color="4b5563")

        assert "Total due" in pdf.page.get_text()

    def test_inline_link(self, pdf):
        pdf.text("Mail <link href='mailto:a@b.com'><b>a@b.com</b></link>", inline_format=True)

        with fitz.open(stream=pdf.to_bytes(), filetype="pdf") as written:
            links = written[0].get_links()

        assert len(links) == 1
        assert links[0]["uri"] == "mailto:a@b.com"

    def test_move_up_and_down(self, pdf):
        pdf.move_down(50)
        pdf.move_up(20)
        assert pdf.cursor == 66

    def test_move_up_stops_at_margin(self, pdf):
        pdf.move_up(100)
        assert pdf.cursor == 36

    def test_overflow_starts_new_page(self, pdf):
        pdf.move_down(800)
        pdf.text("next page")

        assert pdf.page_count == 2
        assert pdf.cursor == pytest.approx(36 + 8 * LEADING)

    def test_table_advances_by_row_heights(self, pdf):
        style = CellStyle(padding=(2, 2, 2, 2), borders=[])

        pdf.table([["a", "b"], ["c", "d"]], cell_style=style)

        row_height = 8 * LEADING + 4
        assert pdf.cursor == pytest.approx(36 + 2 * row_height)

    def test_table_cell_padding_override(self, pdf):
        style = CellStyle(padding=(0, 0, 0, 0), borders=[])

        pdf.table([[TableCell(content="x", padding=(10, 0, 10, 0)), "y"]], cell_style=style)

        assert pdf.cursor == pytest.approx(36 + 8 * LEADING + 20)

    def test_table_text_is_written(self, pdf):
        pdf.table(
            [["Price", "Item"], ["$10", "Widget"]],
            width=pdf.bounds_width,
            cell_style=CellStyle(inline_format=True, align=Align.RIGHT, borders=[]),
            row_borders={0: [BorderSide.BOTTOM]},
        )

        text = pdf.page.get_text()
        assert "Widget" in text
        assert "Price" in text

    def test_column_widths_mismatch(self, pdf):
        with pytest.raises(ConfigurationError):
            pdf.table([["a", "b", "c"]], column_widths=[100, 200])

    def test_empty_table(self, pdf):
        pdf.table([])
        assert pdf.cursor == 36

    def test_image_advances_by_height(self, pdf, png_bytes):
        pdf.image(png_bytes, height=16, position=Align.LEFT)

        assert pdf.cursor == 36 + 16
        assert len(pdf.page.get_images()) == 1

    def test_unreadable_image(self, pdf):
        with pytest.raises(ResourceError):
            pdf.image(b"not an image", height=16)

    def test_missing_font_file(self, tmp_path):
        from rtldoc.models import FontFamily

        with pytest.raises(ResourceError):
            PdfCanvas(fonts=FontFamily(normal=tmp_path / "missing.ttf"))

    def test_output(self, pdf, tmp_path):
        pdf.text("Hello")
        output = tmp_path / "out.pdf"

        pdf.save(output)

        assert pdf.to_bytes().startswith(b"%PDF")
        assert output.read_bytes().startswith(b"%PDF")
