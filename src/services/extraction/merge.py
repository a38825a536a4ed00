"""
Merge extractor outputs into one invoice record.

Precedence per field, highest wins: AI result > heuristic result > fallback.
Each rule table is an ordered list of (field, validity predicate) pairs.
"""

import math
from datetime import date, datetime, UTC
from typing import Any, Callable, Optional
from ..invoice_types import (
    ExtractionResult,
    InvoiceDraft,
    FALLBACK_SUPPLIER,
    FALLBACK_STATUS,
    FALLBACK_CATEGORY,
    UPLOAD_SOURCE,
    DUE_DATE_OFFSET,
    week_label_for,
)


def has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_finite_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


FieldRule = tuple[str, Callable[[Any], bool]]

HEURISTIC_RULES: list[FieldRule] = [
    ("supplier", has_text),
    ("invoice_number", has_text),
    ("issue_date", has_text),
    ("due_date", has_text),
    ("amount", is_finite_number),
]

AI_RULES: list[FieldRule] = HEURISTIC_RULES + [
    ("status", has_text),
    ("category", has_text),
]


def build_fallback_invoice(original_name: str, today: Optional[date] = None) -> InvoiceDraft:
    """Default record for an upload: today's issue date, due in 14 days, zero amount."""
    issue = today or datetime.now(UTC).date()
    due = issue + DUE_DATE_OFFSET
    return InvoiceDraft(
        supplier=FALLBACK_SUPPLIER,
        invoice_number=original_name,
        issue_date=issue.isoformat(),
        due_date=due.isoformat(),
        amount=0,
        status=FALLBACK_STATUS,
        category=FALLBACK_CATEGORY,
        source=UPLOAD_SOURCE,
        week_label=week_label_for(due.isoformat()),
        archived=0,
    )


def _valid_updates(result: ExtractionResult, rules: list[FieldRule]) -> dict[str, Any]:
    updates = {}
    for field_name, is_valid in rules:
        value = getattr(result, field_name)
        if is_valid(value):
            updates[field_name] = value
    return updates


def merge_invoice(
    fallback: InvoiceDraft,
    heuristic: ExtractionResult,
    ai: Optional[ExtractionResult],
) -> InvoiceDraft:
    """
    Combine fallback, heuristic and AI results. Always succeeds.

    The week label is only recomputed when the AI result supplied a due
    date; a due date coming from the heuristic alone keeps the fallback's
    week label.
    """
    merged = fallback.model_copy(update=_valid_updates(heuristic, HEURISTIC_RULES))

    if ai is not None:
        ai_updates = _valid_updates(ai, AI_RULES)
        if "due_date" in ai_updates:
            ai_updates["week_label"] = week_label_for(ai_updates["due_date"])
        merged = merged.model_copy(update=ai_updates)

    return merged
