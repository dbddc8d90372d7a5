"""Data models for rtldoc.

Pydantic models describing what a document is composed from and the
table structures handed to the renderer. All models are frozen: they
are built from caller data, used for one document and discarded.

Model Hierarchy:
- DocumentAttributes → Company, recipient lines, details, line items
- Table rows → TableCell, styled by CellStyle
"""

from .attributes import CONTENT_KEYS, REQUIRED_KEYS, DocumentAttributes
from .base import Align, BaseDocModel, BorderSide, FontFamily, FontStyle
from .company import DEFAULT_DISPLAY, DISPLAY_FIELDS, Company
from .table import ALL_SIDES, CellInput, CellStyle, Padding, TableCell

__all__ = [
    # Base types
    "Align",
    "BaseDocModel",
    "BorderSide",
    "FontFamily",
    "FontStyle",
    # Attributes
    "CONTENT_KEYS",
    "REQUIRED_KEYS",
    "DocumentAttributes",
    # Company
    "DEFAULT_DISPLAY",
    "DISPLAY_FIELDS",
    "Company",
    # Table
    "ALL_SIDES",
    "CellInput",
    "CellStyle",
    "Padding",
    "TableCell",
]
