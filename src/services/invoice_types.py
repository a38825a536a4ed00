
from dataclasses import dataclass
from datetime import timedelta
from pydantic import BaseModel

# Defaults for invoices created from an upload
FALLBACK_SUPPLIER = "Uploaded invoice"
FALLBACK_STATUS = "Upcoming"
FALLBACK_CATEGORY = "Uncategorised"
UPLOAD_SOURCE = "Upload"
PAID_STATUS = "Paid"
DUE_DATE_OFFSET = timedelta(days=14)

PLACEHOLDER_TEXT_TEMPLATE = "Uploaded invoice file: {original_name}. Extract key invoice details."
TEXT_LIKE_EXTENSIONS = (".txt", ".csv", ".json")


def week_label_for(due_date: str) -> str:
    return f"Week of {due_date}"


def placeholder_text(original_name: str) -> str:
    return PLACEHOLDER_TEXT_TEMPLATE.format(original_name=original_name)


@dataclass
class UploadedFile:
    """An uploaded invoice file held in memory for the duration of one request."""

    content: bytes
    original_name: str
    media_type: str | None = None
    size_bytes: int | None = None

    def __post_init__(self):
        if self.size_bytes is None:
            self.size_bytes = len(self.content)


class ExtractionResult(BaseModel):
    """Partial invoice fields from one extractor. None means no signal."""
    supplier: str | None = None
    invoice_number: str | None = None
    issue_date: str | None = None
    due_date: str | None = None
    amount: float | None = None
    status: str | None = None
    category: str | None = None


class InvoiceDraft(BaseModel):
    """Fully populated invoice ready to be handed to the store"""
    supplier: str
    invoice_number: str
    issue_date: str
    due_date: str
    amount: float
    status: str
    category: str
    source: str
    week_label: str
    archived: int = 0
