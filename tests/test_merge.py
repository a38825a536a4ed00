"""
Tests for the merge precedence rules and the fallback invoice.
"""

from datetime import date
from src.services.extraction.merge import build_fallback_invoice, merge_invoice
from src.services.invoice_types import (
    ExtractionResult,
    FALLBACK_CATEGORY,
    FALLBACK_STATUS,
    FALLBACK_SUPPLIER,
    UPLOAD_SOURCE,
)

TODAY = date(2025, 3, 1)


def _fallback():
    return build_fallback_invoice("scan-001.pdf", today=TODAY)


class TestFallbackInvoice:
    def test_all_defaults(self):
        fallback = _fallback()

        assert fallback.supplier == FALLBACK_SUPPLIER == "Uploaded invoice"
        assert fallback.invoice_number == "scan-001.pdf"
        assert fallback.issue_date == "2025-03-01"
        assert fallback.due_date == "2025-03-15"
        assert fallback.amount == 0
        assert fallback.status == FALLBACK_STATUS == "Upcoming"
        assert fallback.category == FALLBACK_CATEGORY == "Uncategorised"
        assert fallback.source == UPLOAD_SOURCE == "Upload"
        assert fallback.week_label == "Week of 2025-03-15"
        assert fallback.archived == 0

    def test_due_date_crosses_year_boundary(self):
        fallback = build_fallback_invoice("x.txt", today=date(2024, 12, 25))
        assert fallback.due_date == "2025-01-08"

    def test_defaults_to_current_date(self):
        fallback = build_fallback_invoice("x.txt")
        date.fromisoformat(fallback.issue_date)
        assert fallback.week_label == f"Week of {fallback.due_date}"


class TestAmountPrecedence:
    def test_heuristic_amount_over_fallback(self):
        merged = merge_invoice(_fallback(), ExtractionResult(amount=500), None)
        assert merged.amount == 500

    def test_ai_amount_when_heuristic_absent(self):
        merged = merge_invoice(_fallback(), ExtractionResult(), ExtractionResult(amount=750))
        assert merged.amount == 750

    def test_ai_amount_over_heuristic(self):
        merged = merge_invoice(_fallback(), ExtractionResult(amount=500), ExtractionResult(amount=750))
        assert merged.amount == 750

    def test_both_absent_keeps_fallback(self):
        merged = merge_invoice(_fallback(), ExtractionResult(), ExtractionResult())
        assert merged.amount == 0

    def test_zero_amount_is_a_valid_signal(self):
        merged = merge_invoice(_fallback(), ExtractionResult(amount=500), ExtractionResult(amount=0))
        assert merged.amount == 0

    def test_non_finite_ai_amount_ignored(self):
        merged = merge_invoice(
            _fallback(),
            ExtractionResult(amount=500),
            ExtractionResult(amount=float("nan")),
        )
        assert merged.amount == 500

        merged = merge_invoice(_fallback(), ExtractionResult(), ExtractionResult(amount=float("inf")))
        assert merged.amount == 0


class TestTextPrecedence:
    def test_blank_strings_are_not_signals(self):
        merged = merge_invoice(
            _fallback(),
            ExtractionResult(supplier="   "),
            ExtractionResult(supplier="", invoice_number=" "),
        )
        assert merged.supplier == "Uploaded invoice"
        assert merged.invoice_number == "scan-001.pdf"

    def test_ai_overrides_heuristic_per_field(self):
        heuristic = ExtractionResult(supplier="Heuristic Co", invoice_number="H-1", issue_date="2025-02-01")
        ai = ExtractionResult(supplier="AI Co")

        merged = merge_invoice(_fallback(), heuristic, ai)

        assert merged.supplier == "AI Co"
        assert merged.invoice_number == "H-1"
        assert merged.issue_date == "2025-02-01"

    def test_status_and_category_only_from_ai(self):
        heuristic = ExtractionResult(status="Paid", category="Rent")
        merged = merge_invoice(_fallback(), heuristic, None)
        assert merged.status == "Upcoming"
        assert merged.category == "Uncategorised"

        merged = merge_invoice(_fallback(), heuristic, ExtractionResult(status="Overdue", category="Utilities"))
        assert merged.status == "Overdue"
        assert merged.category == "Utilities"

    def test_source_and_archived_never_change(self, sample_ai_result):
        merged = merge_invoice(_fallback(), ExtractionResult(supplier="X"), sample_ai_result)
        assert merged.source == "Upload"
        assert merged.archived == 0


class TestWeekLabel:
    def test_ai_due_date_recomputes_week_label(self):
        merged = merge_invoice(_fallback(), ExtractionResult(), ExtractionResult(due_date="2025-01-10"))
        assert merged.due_date == "2025-01-10"
        assert merged.week_label == "Week of 2025-01-10"

    def test_heuristic_due_date_keeps_fallback_week_label(self):
        merged = merge_invoice(_fallback(), ExtractionResult(due_date="2025-06-30"), None)
        assert merged.due_date == "2025-06-30"
        assert merged.week_label == "Week of 2025-03-15"

    def test_heuristic_due_date_with_ai_without_due_date(self):
        merged = merge_invoice(
            _fallback(),
            ExtractionResult(due_date="2025-06-30"),
            ExtractionResult(supplier="AI Co"),
        )
        assert merged.week_label == "Week of 2025-03-15"

    def test_ai_date_passed_through_unformatted(self):
        merged = merge_invoice(_fallback(), ExtractionResult(), ExtractionResult(due_date="10/01/2025"))
        assert merged.due_date == "10/01/2025"
        assert merged.week_label == "Week of 10/01/2025"


def test_merge_does_not_mutate_fallback():
    fallback = _fallback()
    merge_invoice(fallback, ExtractionResult(amount=1), ExtractionResult(supplier="AI Co", due_date="2025-01-10"))
    assert fallback.amount == 0
    assert fallback.supplier == "Uploaded invoice"
    assert fallback.week_label == "Week of 2025-03-15"
