"""Document composer.

Builds the body of a right-to-left business document in a fixed order:
header, details, billing block, line items, footer. Each part is
mirrored (structure) and localized (text) before it reaches the canvas,
so the canvas only ever places visual-order content left to right.
"""

import logging
from pathlib import Path
from typing import Any, ClassVar, Optional, Sequence, Union

from rtldoc.config import get_default_font, settings
from rtldoc.errors import ConfigurationError
from rtldoc.models import (
    Align,
    BorderSide,
    CellStyle,
    Company,
    DocumentAttributes,
    FontStyle,
    TableCell,
)
from rtldoc.render import Canvas, PdfCanvas
from rtldoc.render.resources import ImageSource
from rtldoc.render.resources import load_image as load_image_source
from rtldoc.rtl import bordered_rows, localize, mirror_row, mirror_table

logger = logging.getLogger(__name__)

HEADER_FONT_SIZE = 16
HEADER_COLOR = "4b5563"
LINK_COLOR = "326d92"
LINE_ITEM_PADDING = 6

DEFAULT_FOOTER_TEXT = "اذا كان لديكم أسئلة، اتصلوا بنا في أي وقت عن طريق الايميل "
DEFAULT_FOOTER_SUBJECT = "لدي سؤال بخصوص فاتورة"


class Document:
    """
    A right-to-left business document.

    Construct with an attribute mapping (or keyword attributes) to compose
    the whole body at once. Without content attributes the document starts
    blank and the public render methods can be called piecewise.

    A document is built once, by one caller, start to finish.
    """

    default_title: ClassVar[Optional[str]] = None

    def __init__(
        self,
        attributes: Union[DocumentAttributes, dict, None] = None,
        *,
        canvas: Optional[Canvas] = None,
        **kwargs: Any,
    ):
        """Validate attributes and compose the document.

        Args:
            attributes: Document attributes (company, recipient, details,
                line_items, column_widths, footer, title, logo_height, font,
                page_size).
            canvas: Layout target; a PdfCanvas is created when omitted.
            kwargs: Attributes given as keywords, merged over `attributes`.

        Raises:
            ConfigurationError: If required attributes are missing or invalid.
        """
        self.attributes = DocumentAttributes.load(attributes, **kwargs)
        self.title = self.attributes.title if self.attributes.title is not None else self.default_title

        if canvas is None:
            canvas = PdfCanvas(
                page_size=self.attributes.page_size or settings.page_size,
                fonts=self.attributes.font or get_default_font(),
                font_size=settings.font_size,
            )
        self.canvas = canvas

        self.generate_from(self.attributes)

    def generate_from(self, attributes: DocumentAttributes) -> None:
        """Compose every part of the document from validated attributes."""
        if attributes.is_blank:
            logger.debug("No content attributes, starting blank %s", type(self).__name__)
            return

        company = attributes.company
        logo_height = attributes.logo_height or settings.logo_height

        self.header(company, height=logo_height)
        self.render_details(attributes.details)
        self.render_billing_details(company, attributes.recipient)
        self.render_line_items(attributes.line_items, column_widths=attributes.column_widths)
        footer = attributes.footer if attributes.footer is not None else self.default_message(company)
        self.render_footer(footer)

    def header(self, company: Company, height: float = 16) -> None:
        """Company logo or name on the left, title on the right, same line."""
        if company.logo is None:
            self.canvas.text(
                localize(company.name),
                align=Align.LEFT,
                style=FontStyle.BOLD,
                size=HEADER_FONT_SIZE,
                color=HEADER_COLOR,
                inline_format=True,
            )
        else:
            self.canvas.image(self.load_image(company.logo), height=height, position=Align.LEFT)

        self.canvas.move_up(height)
        if self.title:
            self.canvas.text(
                localize(self.title),
                align=Align.RIGHT,
                style=FontStyle.BOLD,
                size=HEADER_FONT_SIZE,
                inline_format=True,
            )

    def render_details(self, details: Sequence[Sequence[str]], margin_top: float = 16) -> None:
        """Label/value rows, label on the right."""
        rows = [localize(row) for row in mirror_table(details)]

        self.canvas.move_down(margin_top)
        self.canvas.table(
            rows,
            position=Align.RIGHT,
            cell_style=CellStyle(
                borders=[],
                inline_format=True,
                padding=(0, 0, 2, 8),
                align=Align.RIGHT,
            ),
        )

    def render_billing_details(
        self,
        company: Company,
        recipient: Union[Sequence[str], str],
        margin_top: float = 16,
        display_values: Optional[list[str]] = None,
    ) -> None:
        """Company block and recipient block side by side, company on the right."""
        self.canvas.move_down(margin_top)

        if isinstance(recipient, str):
            recipient = [recipient]
        company_details = "\n".join(company.display_values(display_values))

        company_block = f"<b>{localize(company.name)}</b>"
        if company_details:
            company_block += f"\n{localize(company_details)}"
        recipient_block = localize("\n".join(recipient))

        row = mirror_row(
            [
                TableCell(content=company_block, padding=(0, 0, 0, 12)),
                TableCell(content=recipient_block, padding=(0, 0, 0, 12)),
            ]
        )
        self.canvas.table(
            [row],
            width=self.canvas.bounds_width,
            cell_style=CellStyle(borders=[], inline_format=True, align=Align.RIGHT),
        )

    def render_line_items(
        self,
        line_items: Sequence[Sequence[str]],
        margin_top: float = 30,
        column_widths: Optional[Sequence[float]] = None,
    ) -> None:
        """Line-item table with mirrored columns.

        `column_widths` are used as given, in visual (mirrored) order.
        """
        self.canvas.move_down(margin_top)

        rows = [localize(row) for row in mirror_table(line_items)]
        borders = {index: [BorderSide.BOTTOM] for index in bordered_rows(len(rows))}

        self.canvas.table(
            rows,
            width=self.canvas.bounds_width,
            column_widths=column_widths,
            cell_style=CellStyle(
                borders=[],
                border_color=settings.border_color,
                inline_format=True,
                align=Align.RIGHT,
                padding=(LINE_ITEM_PADDING,) * 4,
            ),
            row_borders=borders,
        )

    def render_footer(self, message: str, margin_top: float = 30) -> None:
        """Footer line, right-aligned below the line items."""
        self.canvas.move_down(margin_top)
        self.canvas.text(localize(message), align=Align.RIGHT, inline_format=True)

    def default_message(self, company: Company) -> str:
        """Contact line pointing at the company email, in logical order.

        Raises:
            ConfigurationError: If the company has no email.
        """
        if not company.email:
            raise ConfigurationError("company.email is required for the default footer")

        email = _escape(company.email)
        return (
            f"<color rgb='{LINK_COLOR}'>"
            f"<link href='mailto:{email}?subject={DEFAULT_FOOTER_SUBJECT}'><b>{email}</b></link>"
            f"</color> {DEFAULT_FOOTER_TEXT}"
        )

    def localize(
        self, text: Union[str, Sequence[str], None]
    ) -> Union[str, list[str], None]:
        """Localize a fragment or a list of fragments."""
        return localize(text)

    def load_image(self, logo: ImageSource) -> bytes:
        """Fetch logo bytes from a path, URL, bytes or stream.

        Raises:
            ResourceError: If the logo cannot be read.
        """
        return load_image_source(logo)

    def render(self) -> bytes:
        """Return the composed document as PDF bytes."""
        return self.canvas.to_bytes()

    def render_file(self, path: Union[str, Path]) -> None:
        """Write the composed document to a file."""
        self.canvas.save(path)


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace("'", "&apos;")
