"""Document kinds with their default titles."""

from .base import Document


class Invoice(Document):
    """Invoice with line items and totals."""

    default_title = "فاتورة"


class Receipt(Document):
    """Receipt for a completed payment."""

    default_title = "إيصال"


class Statement(Document):
    """Account statement."""

    default_title = "كشف حساب"


DOCUMENT_KINDS = {
    "document": Document,
    "invoice": Invoice,
    "receipt": Receipt,
    "statement": Statement,
}
