"""
Label-based invoice field extraction.

Scans raw text line by line for labelled fields ("Supplier: ...",
"Due Date - ...") and parses the value after the first separator.
A label found inside unrelated prose still counts as a match.
"""

import math
import re
from typing import Optional
from dateutil import parser as date_parser
from ..invoice_types import ExtractionResult

# Synonyms per field, in priority order
FIELD_LABELS: dict[str, tuple[str, ...]] = {
    "supplier": ("supplier",),
    "invoice_number": ("invoice number", "invoice no", "inv"),
    "issue_date": ("issue date",),
    "due_date": ("due date",),
    "amount": ("amount", "total", "balance"),
}

DATE_FIELDS = ("issue_date", "due_date")

_SEPARATOR = re.compile(r"[:\-]")
_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def _find_labelled_value(lines: list[str], labels: tuple[str, ...]) -> Optional[str]:
    """Return the value of the first line matching the highest-priority label"""
    for label in labels:
        for line in lines:
            if label not in line.lower():
                continue
            parts = _SEPARATOR.split(line, maxsplit=1)
            if len(parts) < 2:
                return None
            value = parts[1].strip()
            return value or None
    return None


def parse_date(value: str) -> Optional[str]:
    """Parse a free-form date and normalise it to YYYY-MM-DD."""
    try:
        return date_parser.parse(value).date().isoformat()
    except (ValueError, OverflowError):
        return None


def parse_amount(value: str) -> Optional[float]:
    """Parse "$1,234.56"-style amounts. Non-finite or unparseable -> None."""
    cleaned = _NON_NUMERIC.sub("", value)
    try:
        amount = float(cleaned)
    except ValueError:
        return None
    return amount if math.isfinite(amount) else None


def extract_heuristic(text: str) -> ExtractionResult:
    """
    Extract supplier, invoice number, dates and amount from raw text.

    Never raises; empty text yields an all-empty result. Status and
    category are never produced here.
    """
    if not text:
        return ExtractionResult()

    lines = text.splitlines()
    fields: dict[str, object] = {}

    for field_name, labels in FIELD_LABELS.items():
        raw_value = _find_labelled_value(lines, labels)
        if raw_value is None:
            continue

        if field_name in DATE_FIELDS:
            parsed = parse_date(raw_value)
        elif field_name == "amount":
            parsed = parse_amount(raw_value)
        else:
            parsed = raw_value

        if parsed is not None:
            fields[field_name] = parsed

    return ExtractionResult(**fields)
