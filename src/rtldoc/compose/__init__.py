"""Document composition.

Document is the orchestrator; Invoice, Receipt and Statement only differ
in their default title.
"""

from .base import Document
from .documents import DOCUMENT_KINDS, Invoice, Receipt, Statement

__all__ = [
    "Document",
    "Invoice",
    "Receipt",
    "Statement",
    "DOCUMENT_KINDS",
]
