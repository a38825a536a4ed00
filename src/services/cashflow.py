"""
Cashflow metrics over stored invoices, with an optional LLM narrative.
"""

import json
from datetime import date, datetime, timedelta, UTC
from typing import Dict, List, Optional
from loguru import logger
from pydantic import BaseModel
from .invoice_types import PAID_STATUS
from .llm_client import LLMClient

OVERDUE_STATUS = "Overdue"
DUE_SOON_WINDOW = timedelta(days=7)

NARRATION_INSTRUCTION = (
    "You are a cashflow assistant for a small business. "
    "Given JSON metrics about supplier invoices, write two or three short, plain-English "
    "sentences summarising what needs paying, what is overdue, and the largest spending "
    "category. Use the numbers provided; do not invent figures."
)


class WeekTotal(BaseModel):
    week_label: str
    total: float
    count: int


class CashflowSummary(BaseModel):
    total_outstanding: float = 0.0
    outstanding_count: int = 0
    overdue_total: float = 0.0
    overdue_count: int = 0
    due_next_7_days_total: float = 0.0
    paid_total: float = 0.0
    by_category: Dict[str, float] = {}
    by_week: List[WeekTotal] = []


def _parse_iso_date(value) -> Optional[date]:
    try:
        return date.fromisoformat(str(value))
    except (TypeError, ValueError):
        return None


def compute_cashflow_summary(invoices: list, today: Optional[date] = None) -> CashflowSummary:
    """
    Aggregate invoice rows into cashflow metrics.

    Archived invoices are ignored. An invoice is overdue when it is unpaid and
    either flagged "Overdue" or past its due date; invoices with unparseable
    due dates never count as overdue or due soon.
    """
    today = today or datetime.now(UTC).date()
    summary = CashflowSummary()
    weeks: Dict[str, WeekTotal] = {}

    for invoice in invoices:
        if invoice.get("archived"):
            continue

        amount = float(invoice.get("amount") or 0)
        status = invoice.get("status")

        if status == PAID_STATUS:
            summary.paid_total += amount
            continue

        summary.total_outstanding += amount
        summary.outstanding_count += 1

        category = invoice.get("category") or "Uncategorised"
        summary.by_category[category] = summary.by_category.get(category, 0.0) + amount

        week_label = invoice.get("week_label") or "Unscheduled"
        week = weeks.setdefault(week_label, WeekTotal(week_label=week_label, total=0.0, count=0))
        week.total += amount
        week.count += 1

        due = _parse_iso_date(invoice.get("due_date"))
        if status == OVERDUE_STATUS or (due is not None and due < today):
            summary.overdue_total += amount
            summary.overdue_count += 1
        elif due is not None and due <= today + DUE_SOON_WINDOW:
            summary.due_next_7_days_total += amount

    summary.by_week = list(weeks.values())
    return summary


async def narrate_cashflow(summary: CashflowSummary, client: LLMClient) -> Optional[str]:
    """Ask the LLM to describe the metrics. Returns None if unavailable or on any failure."""
    if not client.configured:
        logger.info("LLM not configured - skipping cashflow narrative")
        return None

    try:
        narrative = await client.complete(NARRATION_INSTRUCTION, json.dumps(summary.model_dump()))
    except Exception as e:
        logger.warning(f"Cashflow narration failed: {e}")
        return None

    return narrative.strip() or None
