"""
Abstract base class for invoice storage implementations.

Defines the interface that all invoice stores must implement,
enabling dependency injection and easy swapping of storage backends.
"""

from abc import ABC, abstractmethod
from typing import Optional


class InvoiceStoreBase(ABC):
    """
    Abstract base class for invoice storage.

    Implementations can use:
    - In-memory storage (for testing/demo)
    - SQLite (for single-instance deployments)
    """

    @abstractmethod
    def create_invoice(self, invoice_data: dict) -> dict:
        """
        Store a new invoice and return the stored record.

        Args:
            invoice_data: Dictionary with supplier, invoice_number, issue_date,
                due_date, amount, status, category, source, week_label, archived

        Returns:
            Stored invoice dictionary including the assigned integer "id"
        """
        pass

    @abstractmethod
    def get_invoice(self, invoice_id: int) -> Optional[dict]:
        """
        Get an invoice by ID.

        Returns:
            Invoice dictionary, or None if not found
        """
        pass

    @abstractmethod
    def list_invoices(self, include_archived: bool = False) -> list:
        """
        List invoices, ordered by ID.

        Args:
            include_archived: Also return archived invoices (default: False)
        """
        pass

    @abstractmethod
    def mark_paid(self, invoice_id: int) -> Optional[dict]:
        """
        Set an invoice's status to "Paid".

        Returns:
            Updated invoice dictionary, or None if not found
        """
        pass

    @abstractmethod
    def archive(self, invoice_id: int) -> Optional[dict]:
        """
        Archive an invoice so it no longer appears in the default listing.

        Returns:
            Updated invoice dictionary, or None if not found
        """
        pass
