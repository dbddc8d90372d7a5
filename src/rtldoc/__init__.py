"""rtldoc - right-to-left business documents for Arabic.

Composes receipts, invoices and statements whose text is shaped and
reordered into visual order while inline markup stays intact, and whose
tables are mirrored so a left-to-right layout engine produces an RTL page.
"""

from rtldoc.compose import DOCUMENT_KINDS, Document, Invoice, Receipt, Statement
from rtldoc.config import Settings, get_default_font, set_default_font, settings
from rtldoc.errors import ConfigurationError, MarkupError, ResourceError, RtlDocError
from rtldoc.models import Company, DocumentAttributes, FontFamily
from rtldoc.rtl import localize, mirror_row, mirror_table

__version__ = "0.1.0"

__all__ = [
    # Documents
    "Document",
    "Invoice",
    "Receipt",
    "Statement",
    "DOCUMENT_KINDS",
    # Configuration
    "Settings",
    "settings",
    "set_default_font",
    "get_default_font",
    # Models
    "Company",
    "DocumentAttributes",
    "FontFamily",
    # RTL
    "localize",
    "mirror_row",
    "mirror_table",
    # Errors
    "RtlDocError",
    "ConfigurationError",
    "MarkupError",
    "ResourceError",
]
