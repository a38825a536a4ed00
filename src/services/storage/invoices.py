"""
In-memory invoice storage (for tests and demos).
Use SQLiteInvoiceStore for anything that should survive a restart.
"""
import itertools
from typing import Dict, Optional
from ..invoice_types import PAID_STATUS
from .invoice_store_base import InvoiceStoreBase

INVOICE_COLUMNS = (
    "supplier",
    "invoice_number",
    "issue_date",
    "due_date",
    "amount",
    "status",
    "category",
    "source",
    "week_label",
    "archived",
)


class InMemoryInvoiceStore(InvoiceStoreBase):
    def __init__(self):
        self._invoices: Dict[int, dict] = {}
        self._ids = itertools.count(1)

    def create_invoice(self, invoice_data: dict) -> dict:
        """Store a new invoice and return it with its assigned ID"""
        invoice_id = next(self._ids)
        row = {"id": invoice_id}
        for column in INVOICE_COLUMNS:
            row[column] = invoice_data.get(column)
        row["archived"] = invoice_data.get("archived") or 0
        self._invoices[invoice_id] = row
        return dict(row)

    def get_invoice(self, invoice_id: int) -> Optional[dict]:
        row = self._invoices.get(invoice_id)
        return dict(row) if row else None

    def list_invoices(self, include_archived: bool = False) -> list:
        return [
            dict(row)
            for row in self._invoices.values()
            if include_archived or not row["archived"]
        ]

    def mark_paid(self, invoice_id: int) -> Optional[dict]:
        if invoice_id not in self._invoices:
            return None
        self._invoices[invoice_id]["status"] = PAID_STATUS
        return self.get_invoice(invoice_id)

    def archive(self, invoice_id: int) -> Optional[dict]:
        if invoice_id not in self._invoices:
            return None
        self._invoices[invoice_id]["archived"] = 1
        return self.get_invoice(invoice_id)
