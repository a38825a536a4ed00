from functools import lru_cache
from ...core.config import settings
from .invoice_store_base import InvoiceStoreBase
from .invoices import InMemoryInvoiceStore
from .invoices_sqlite import SQLiteInvoiceStore


@lru_cache(maxsize=1)
def get_invoice_store() -> InvoiceStoreBase:
    """Process-wide invoice store, created on first use from settings"""
    return SQLiteInvoiceStore(settings.database_path, seed_demo_data=settings.seed_demo_data)


__all__ = ["InvoiceStoreBase", "InMemoryInvoiceStore", "SQLiteInvoiceStore", "get_invoice_store"]
